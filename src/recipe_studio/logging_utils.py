# logging_utils.py
"""
logging_utils.py

Central logging utilities for the Recipe Studio project.

Log format (one line per entry):
<RunId>|<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<ModulePurpose>|
<InvokingFunc>|<InvokingFuncPurpose>|<Detail>|<NextStep>|<Resolution>|<END>

Modules get a logger with get_logger(__name__) and pass the optional context
fields through `extra=`:

    logger.info(
        "Selected template %s",
        template.id,
        extra={
            "invoking_func": "match",
            "invoking_purpose": "Pick a template for a generation request",
            "next_step": "Customize the template",
            "resolution": "",
        },
    )
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Dict, Optional

LOG_RUN_ID: str = uuid.uuid4().hex[:8]
# Alias for scripts that use RUN_ID
RUN_ID: str = LOG_RUN_ID


class StructuredFormatter(logging.Formatter):
    """
    Emit a single '|' separated line conforming to the log template above.
    """

    # High-level purposes by module name
    MODULE_PURPOSES: Dict[str, str] = {
        "catalog": "Built-in recipe template catalog, cuisine affinity and category cues",
        "matcher": "Keyword-scored template matching and recipe customization",
        "validation": "Caller-side checks on recipe generation requests",
        "service": "Orchestrate validate -> match -> customize -> save/notify",
        "store": "Supabase access for the recipes table",
        "notify_team": "Build and send team activity notifications",
        "admin_report": "Send dashboard exports to the admin edge function",
        "shopping_list": "Shopping list built from recipe ingredients",
        "recipe_filter": "Search and facet filters over recipes",
        "dashboard": "Recipe analytics for the dashboard and team reports",
        "config": "Load settings and create the Supabase client",
        "generate_example": "Command line demo of the recipe generator",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        """Format log record into structured pipe-delimited format."""
        dt = datetime.datetime.fromtimestamp(record.created)
        date_str = dt.strftime("%Y-%m-%d")
        time_str = dt.strftime("%H:%M:%S")

        run_id = getattr(record, "run_id", RUN_ID)

        level = record.levelname
        code_location = f"{record.filename}:{record.lineno}"
        func_name = record.funcName
        module_name = record.module
        module_purpose = getattr(record, "module_purpose", "") or self.MODULE_PURPOSES.get(
            module_name, ""
        )

        # Optional extra context supplied via logger calls
        invoking_func = getattr(record, "invoking_func", "")
        invoking_purpose = getattr(record, "invoking_purpose", "")
        next_step = getattr(record, "next_step", "")
        resolution = getattr(record, "resolution", "")

        detail = record.getMessage()
        if record.exc_info:
            detail = f"{detail} | EXC={record.exc_info[1]!r}"

        return (
            f"{run_id}|{date_str}|{time_str}|{level}|{code_location}|"
            f"{module_name}.{func_name}|{module_purpose}|"
            f"{invoking_func}|{invoking_purpose}|"
            f"{detail}|{next_step}|{resolution}|<END>"
        )


def init_logging(level: int = logging.INFO) -> None:
    """
    Initialize the root logger once with StructuredFormatter.

    Call get_logger() from modules instead of calling logging.basicConfig()
    everywhere, so configuration stays central.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (REPL, pytest, host application)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured with structured formatting."""
    init_logging()
    return logging.getLogger(name)


_script_logger = get_logger("recipe_studio")


def _log(
    level: int,
    message: str,
    *,
    module_purpose: str,
    invoking_function: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
    exc: Optional[BaseException] = None,
) -> None:
    if exc is not None:
        message = f"{message} | EXC={exc!r}"
    _script_logger.log(
        level,
        message,
        extra={
            "module_purpose": module_purpose,
            "invoking_func": invoking_function,
            "invoking_purpose": invoking_purpose,
            "next_step": next_step,
            "resolution": resolution,
        },
        stacklevel=3,
    )


def log_info(
    message: str,
    *,
    module_purpose: str,
    invoking_function: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
) -> None:
    _log(
        logging.INFO,
        message,
        module_purpose=module_purpose,
        invoking_function=invoking_function,
        invoking_purpose=invoking_purpose,
        next_step=next_step,
        resolution=resolution,
    )


def log_error(
    message: str,
    *,
    module_purpose: str,
    invoking_function: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
    exc: Optional[BaseException] = None,
) -> None:
    _log(
        logging.ERROR,
        message,
        module_purpose=module_purpose,
        invoking_function=invoking_function,
        invoking_purpose=invoking_purpose,
        next_step=next_step,
        resolution=resolution,
        exc=exc,
    )
