from .status import Status


def process_value(value: int) -> Status:
    """
    Equivalence class testing: classify an integer by its sign class.

    Classes:
      - negative      -> Status.FAILURE
      - zero          -> Status.SUCCESS
      - positive      -> Status.SUCCESS

    One representative per class is enough to exercise the function: any other
    member of the same class is expected to behave identically.
    """
    if value < 0:
        return Status.FAILURE
    if value == 0:
        return Status.SUCCESS
    return Status.SUCCESS
