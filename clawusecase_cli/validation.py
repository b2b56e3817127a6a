"""Length and presence rules for a SubmissionRecord."""

from clawusecase_cli import config


def validate(record):
    """Return every rule violation for *record*, in field order.

    All rules are checked; an empty list means the record can be sent.
    """
    errors = []
    for attr, label, minimum in config.MIN_LENGTHS:
        value = getattr(record, attr)
        if not value or len(value) < minimum:
            errors.append(f"{label} must be at least {minimum} characters")
    if not record.category:
        errors.append("Category is required")
    if not record.skills:
        errors.append("At least one skill/tool is required")
    if not record.author_username:
        errors.append("Author username is required (use --author-username or --anonymous)")
    return errors
