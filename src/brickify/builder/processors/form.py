"""Forms and buttons.

A form is rebuilt as a single form element whose fields are derived from
its controls; the controls themselves are not emitted.
"""

from __future__ import annotations

from typing import Any

from bs4 import NavigableString, Tag

from brickify.builder.context import BuildContext
from brickify.builder.dom import attr, text_of
from brickify.builder.model import Leaf, ProcessorResult

FORM_CONTROLS = ("input", "select", "textarea", "button")
FORM_ATTRIBUTES = ("action", "method", "enctype", "autocomplete", "novalidate", "target")
KEPT_INPUT_TYPES = ("email", "password", "file", "checkbox", "submit")

FORM_DEFAULTS: dict[str, Any] = {
    "submitButtonStyle": "primary",
    "actions": ["email"],
    "successMessage": "Message successfully sent. We will get back to you as soon as possible.",
    "emailSubject": "Contact form request",
    "emailTo": "admin_email",
    "fromName": "bricks",
    "emailErrorMessage": "Submission failed. Please reload the page and try to submit the form again.",
    "htmlEmail": True,
    "mailchimpPendingMessage": "Please check your email to confirm your subscription.",
    "mailchimpErrorMessage": "Sorry, but we could not subscribe you.",
    "sendgridErrorMessage": "Sorry, but we could not subscribe you.",
    "showLabels": True,
    "submitButtonText": "Submit",
}


def field_type(control: Tag) -> str:
    if control.name in ("textarea", "select"):
        return control.name
    if control.name == "button":
        return "submit" if attr(control, "type", "submit").lower() == "submit" else "button"
    kind = attr(control, "type", "text").lower()
    return kind if kind in KEPT_INPUT_TYPES else "text"


def _label_for(form: Tag, control: Tag) -> str:
    control_id = attr(control, "id")
    if not control_id:
        return ""
    for label in form.find_all("label"):
        if attr(label, "for") == control_id:
            return text_of(label).replace("*", "", 1).replace(":", "", 1).strip()
    return ""


def _next_text(control: Tag) -> str:
    sibling = control.next_sibling
    return sibling.strip() if isinstance(sibling, NavigableString) else ""


def build_field(form: Tag, control: Tag, ids) -> dict[str, Any] | None:
    """The field settings for one control, or None when it is not a field."""
    if attr(control, "type").lower() == "hidden":
        return None
    kind = field_type(control)
    if kind in ("submit", "button"):
        return None

    field: dict[str, Any] = {
        "type": kind,
        "id": ids(),
        "name": attr(control, "name"),
        "label": _label_for(form, control),
        "placeholder": attr(control, "placeholder"),
        "required": control.has_attr("required"),
        "value": attr(control, "value"),
    }

    if kind in ("text", "email", "password"):
        if control.has_attr("minlength"):
            field["minLength"] = attr(control, "minlength")
        if control.has_attr("maxlength"):
            field["maxLength"] = attr(control, "maxlength")
    elif kind == "file":
        field["fileUploadLimit"] = "1"
        field["fileUploadSize"] = "1"
        if control.has_attr("accept"):
            field["fileUploadAllowedTypes"] = attr(control, "accept")
    elif kind == "checkbox":
        field["label"] = field["label"] or _next_text(control)
        field["options"] = field["label"]
        if not field["placeholder"]:
            field["placeholder"] = field["label"] or field["name"]
    elif kind == "select":
        field["options"] = "\n".join(text_of(o) for o in control.find_all("option"))
        field["valueLabelOptions"] = True
    return field


class FormProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "form"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        settings: dict[str, Any] = {"fields": [], **FORM_DEFAULTS}
        settings["actions"] = list(FORM_DEFAULTS["actions"])

        for control in element.find_all(FORM_CONTROLS):
            if field_type(control) == "submit":
                text = text_of(control) if control.name == "button" else attr(control, "value")
                settings["submitButtonText"] = text or "Submit"
                continue
            field = build_field(element, control, ctx.ids)
            if field is not None:
                settings["fields"].append(field)

        for name in FORM_ATTRIBUTES:
            if element.has_attr(name):
                settings[name] = attr(element, name)
        return Leaf(ctx.new_node("form", settings, label=ctx.label_for(element)))


class ButtonProcessor:
    def can_handle(self, element: Tag, ctx: BuildContext) -> bool:
        return element.name == "button"

    def process(self, element: Tag, ctx: BuildContext) -> ProcessorResult:
        settings: dict[str, Any] = {
            "style": "primary",
            "tag": "button",
            "size": "md",
            "text": text_of(element) or "Button",
        }
        if element.has_attr("disabled"):
            settings["_attributes"] = [{"id": ctx.ids(), "name": "disabled", "value": "disabled"}]
        return Leaf(ctx.new_node("button", settings, label=ctx.label_for(element)))
