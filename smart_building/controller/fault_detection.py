"""Fault summary built from the managers' raw status strings."""

FAULT_MARKER = "FAULT"


def detect_faults(light_status: str, door_status: str, fire_alarm_status: str) -> str:
    """
    Return the labels of every faulty manager, each followed by a comma.

    ``("Lights,FAULT,", "Doors,OK,", "FireAlarm,FAULT,")`` gives
    ``"Lights,FireAlarm,"``; nothing faulty gives ``""``.
    """
    checks = (
        (light_status, "Lights"),
        (door_status, "Doors"),
        (fire_alarm_status, "FireAlarm"),
    )
    faults = [label for status, label in checks if FAULT_MARKER in status]
    if not faults:
        return ""
    return ",".join(faults) + ","
