"""Exceptions raised by the macro calculation engine."""


class MacroPlannerError(Exception):
    code = "E_MACRO"

    def __init__(self, message: str = "", field: str = None) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"code": self.code, "message": str(self), "field": self.field}


class ValidationError(MacroPlannerError):
    """A profile field is missing, non-numeric or out of range."""
    code = "E_VALIDATION"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}", field=field)


class ConstraintError(MacroPlannerError):
    """Macro split percentages do not add up to 100."""
    code = "E_CONSTRAINT"

    def __init__(self, total) -> None:
        self.total = total
        super().__init__(
            f"Your macro split percentages total {total:g}%. "
            "They must add up to exactly 100%.",
            field="macro_split",
        )


class DomainError(MacroPlannerError):
    """An enumerated field holds a value outside its closed set."""
    code = "E_DOMAIN"

    def __init__(self, field: str, value, allowed) -> None:
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid {field} {value!r}. Choose from: {', '.join(self.allowed)}",
            field=field,
        )
