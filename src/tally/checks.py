from numbers import Real

from django.core.checks import Error, register, Tags

from .conf import get_setting


@register(Tags.compatibility)
def check_counter_settings(app_configs, **kwargs):
    """
    Check that the TALLY_* settings have values counters can work with.
    """
    errors = []

    step = get_setting("TALLY_DEFAULT_STEP")
    if isinstance(step, bool) or not isinstance(step, Real):
        errors.append(
            Error(
                f"TALLY_DEFAULT_STEP must be a number, not {type(step).__name__}.",
                hint="Set TALLY_DEFAULT_STEP = 1 in settings.py, or remove it.",
                id="tally.E001",
            )
        )

    if not isinstance(get_setting("TALLY_VALIDATE_RANGE"), bool):
        errors.append(
            Error(
                "TALLY_VALIDATE_RANGE must be True or False.",
                id="tally.E002",
            )
        )

    return errors
