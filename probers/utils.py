"""Helpers shared by the probers."""


def set_health(gauge, value, healthy, *labels):
    """
    Set a status gauge using the literal status string as label.

    The value is 1 if the status equals the healthy value, 0 otherwise.
    Extra label values are prepended to the status label.
    """
    gauge.labels(*labels, value).set(1 if value == healthy else 0)


def set_flag(gauge, flag):
    """Set an unlabeled gauge to 1 when the flag is true, leave it untouched otherwise."""
    if flag:
        gauge.set(1)
