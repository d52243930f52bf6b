from __future__ import annotations

from enum import Enum


class ComponentName(str, Enum):
    # Form
    Input = "Input"
    PasswordInput = "PasswordInput"
    EmailInput = "EmailInput"
    SearchInput = "SearchInput"
    Textarea = "Textarea"
    Button = "Button"
    SecondaryButton = "SecondaryButton"
    SubmitButton = "SubmitButton"
    Checkbox = "Checkbox"
    Radio = "Radio"
    Select = "Select"
    # Layout
    ContentCard = "ContentCard"
    Panel = "Panel"
    Divider = "Divider"
    # Navigation
    Breadcrumbs = "Breadcrumbs"
    Tabs = "Tabs"
    # Feedback
    Banner = "Banner"
    SectionMessage = "SectionMessage"
    Badge = "Badge"
    # User interface
    Avatar = "Avatar"
    Tooltip = "Tooltip"
    Dialog = "Dialog"
    # Interactive
    Accordion = "Accordion"
    Switch = "Switch"
    Slider = "Slider"
    # Data display
    Table = "Table"
    Progress = "Progress"
    Pagination = "Pagination"

    def __str__(self) -> str:
        return self.value


class CatalogError(Exception):
    """Raised when the static component tables are inconsistent."""


class UnknownComponentError(CatalogError):
    """Raised when a caller asks for a component the catalog does not define."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown component: {name}")
        self.name = name
