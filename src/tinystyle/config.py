from __future__ import annotations

from dataclasses import dataclass, field

from tinystyle.model.stylesheet import Stylesheet
from tinystyle.model.values import Display


@dataclass(frozen=True)
class StyleConfig:
    default_display: Display = Display.INLINE
    user_agent_stylesheet: str = ""  # e.g., "div, p { display: block; }"
    max_workers: int | None = None
    # Parsed from user_agent_stylesheet; a syntax error raises here, not during resolution.
    user_agent_rules: Stylesheet | None = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.user_agent_stylesheet:
            from tinystyle.parser import parse_stylesheet

            object.__setattr__(
                self, "user_agent_rules", parse_stylesheet(self.user_agent_stylesheet)
            )
