from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    LIGHT = "LIGHT"
    DARK = "DARK"


@dataclass(frozen=True)
class UserPreferences:
    locale: str = "ru"
    theme: Theme = Theme.LIGHT
    default_currency: str = "RUB"
    display_name: str = ""
    avatar_url: str | None = None
