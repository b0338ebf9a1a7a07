# src/testlab/core/logging/
# ├─ __init__.py            # public API: setup_logging, get_narrator, set_section
# ├─ builder.py             # make_dict_config(settings) + setup_logging(settings) + get_narrator()
# ├─ formatters.py          # JsonFormatter, ColorFormatter
# ├─ filters.py             # SectionFilter (+ contextvar helpers)
# └─ handlers.py            # handler factories (narration, console, file, error_file)


from .builder import setup_logging, make_dict_config, get_narrator, NARRATION_LOGGER
from .filters import set_section, reset_section, get_section, SectionFilter

__all__ = [
    "setup_logging",
    "make_dict_config",
    "get_narrator",
    "NARRATION_LOGGER",
    "set_section",
    "reset_section",
    "get_section",
    "SectionFilter",
]
