"""Keyword and phrase tables mapping free text to components.

Phrase rules are matched as substrings of the whole query and win outright.
Keyword rules are only consulted when no phrase matched.
"""
from __future__ import annotations

from typing import Dict, Tuple

from suggester.catalog.models import ComponentName

ComponentSet = Tuple[ComponentName, ...]


def _c(*names: str) -> ComponentSet:
    return tuple(ComponentName(name) for name in names)


KEYWORD_RULES: Dict[str, ComponentSet] = {
    # Authentication & login
    "login": _c("EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "signin": _c("EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "sign in": _c("EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "authentication": _c("EmailInput", "PasswordInput", "SubmitButton"),
    "auth": _c("EmailInput", "PasswordInput", "SubmitButton"),

    # Registration & signup
    "signup": _c("Input", "EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "register": _c("Input", "EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "registration": _c("Input", "EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "sign up": _c("Input", "EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),

    # Form elements
    "form": _c("Input", "Button"),
    "contact form": _c("Input", "EmailInput", "Textarea", "SubmitButton"),
    "search": _c("SearchInput", "Button"),
    "search form": _c("SearchInput", "Button"),
    "filter": _c("Input", "Select", "Checkbox", "Button"),

    # Specific inputs
    "input": _c("Input"),
    "text": _c("Input"),
    "textbox": _c("Input"),
    "field": _c("Input"),
    "email": _c("EmailInput"),
    "password": _c("PasswordInput"),
    "textarea": _c("Textarea"),
    "description": _c("Textarea"),
    "message text": _c("Textarea"),
    "comment": _c("Textarea"),

    # Buttons & actions
    "button": _c("Button"),
    "submit": _c("SubmitButton"),
    "action": _c("Button"),
    "cta": _c("Button"),
    "primary": _c("Button"),
    "secondary": _c("SecondaryButton"),

    # Selection
    "checkbox": _c("Checkbox"),
    "check": _c("Checkbox"),
    "remember": _c("Checkbox"),
    "agree": _c("Checkbox"),
    "terms": _c("Checkbox"),
    "radio": _c("Radio"),
    "option": _c("Radio"),
    "choice": _c("Radio"),
    "select": _c("Select"),
    "dropdown": _c("Select"),
    "picker": _c("Select"),
    "switch": _c("Switch"),
    "toggle": _c("Switch"),
    "slider": _c("Slider"),
    "range": _c("Slider"),

    # Layout & content
    "card": _c("ContentCard"),
    "content": _c("ContentCard"),
    "panel": _c("Panel"),
    "section": _c("Panel"),
    "container": _c("Panel"),
    "divider": _c("Divider"),
    "separator": _c("Divider"),
    "line": _c("Divider"),

    # Navigation
    "navigation": _c("Breadcrumbs", "Tabs"),
    "nav": _c("Breadcrumbs", "Tabs"),
    "breadcrumb": _c("Breadcrumbs"),
    "breadcrumbs": _c("Breadcrumbs"),
    "tab": _c("Tabs"),
    "tabs": _c("Tabs"),
    "menu": _c("Tabs"),

    # Feedback & notifications
    "banner": _c("Banner"),
    "notification": _c("Banner", "SectionMessage"),
    "alert": _c("Banner", "SectionMessage"),
    "message": _c("SectionMessage"),
    "info": _c("SectionMessage"),
    "warning": _c("Banner"),
    "error": _c("Banner"),
    "success": _c("Banner"),
    "badge": _c("Badge"),
    "label": _c("Badge"),
    "tag": _c("Badge"),

    # User interface
    "avatar": _c("Avatar"),
    "profile": _c("Avatar", "ContentCard", "Button"),
    "user": _c("Avatar"),
    "photo": _c("Avatar"),
    "image": _c("Avatar"),
    "tooltip": _c("Tooltip"),
    "help": _c("Tooltip"),
    "hint": _c("Tooltip"),
    "dialog": _c("Dialog"),
    "modal": _c("Dialog"),
    "popup": _c("Dialog"),
    "overlay": _c("Dialog"),

    # Interactive
    "accordion": _c("Accordion"),
    "collapse": _c("Accordion"),
    "expand": _c("Accordion"),
    "faq": _c("Accordion"),

    # Data display
    "table": _c("Table"),
    "list": _c("Table"),
    "data": _c("Table"),
    "grid": _c("Table"),
    "progress": _c("Progress"),
    "loading": _c("Progress"),
    "status": _c("Progress", "Badge"),
    "pagination": _c("Pagination"),
    "paging": _c("Pagination"),
    "pages": _c("Pagination"),

    # Common UI patterns
    "dashboard": _c("ContentCard", "Banner", "Table", "Progress"),
    "admin": _c("Table", "Button", "Banner", "Pagination"),
    "settings": _c("Input", "Switch", "Select", "Button"),
    "preferences": _c("Switch", "Select", "Checkbox", "Button"),
    "profile page": _c("Avatar", "Input", "Button", "Divider"),
    "user profile": _c("Avatar", "Input", "Button"),
    "account": _c("Input", "EmailInput", "PasswordInput", "Button"),
    "checkout": _c("Input", "Select", "Checkbox", "SubmitButton"),
    "payment": _c("Input", "Select", "SubmitButton"),
    "billing": _c("Input", "Select", "Checkbox", "SubmitButton"),
}


PHRASE_RULES: Dict[str, ComponentSet] = {
    "login form": _c("EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "registration form": _c("Input", "EmailInput", "PasswordInput", "Checkbox", "SubmitButton"),
    "contact form": _c("Input", "EmailInput", "Textarea", "SubmitButton"),
    "search form": _c("SearchInput", "Button"),
    "user profile": _c("Avatar", "Input", "EmailInput", "Button"),
    "settings page": _c("Input", "Switch", "Select", "Button"),
    "admin dashboard": _c("ContentCard", "Table", "Banner", "Pagination"),
    "data table": _c("Table", "SearchInput", "Pagination"),
    "filter form": _c("Input", "Select", "Checkbox", "Button"),
    "checkout form": _c("Input", "Select", "Checkbox", "SubmitButton"),
    "feedback form": _c("Input", "Textarea", "Radio", "SubmitButton"),
    "survey form": _c("Input", "Radio", "Checkbox", "Textarea", "SubmitButton"),
}


FALLBACK_COMPONENTS: ComponentSet = _c("Input", "Button")
