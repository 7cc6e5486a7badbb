# mynl/cli/decorators.py
# CLI decorators for error handling

import functools
from typing import Callable, TypeVar, Any, cast

import typer

from ..core.constants import EXIT_CODE
from ..core.exceptions import (
    MynlError,
    OptionsError,
    ConfigurationError,
    JSONParsingError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for reporting mynl errors on stderr; the run is aborted w/ EXIT_CODE
def handle_mynl_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..mynl_io.console import err_console

        try:
            return func(*args, **kwargs)
        except OptionsError as e:
            for message in e.errors:
                err_console.print(format_error_message("Option Error", message), soft_wrap=True)
            raise typer.Exit(EXIT_CODE)
        except ConfigurationError as e:
            err_console.print(format_error_message("Configuration Error", str(e)), soft_wrap=True)
            raise typer.Exit(EXIT_CODE)
        except FileOperationError as e:
            err_console.print(format_error_message("File Error", str(e)), soft_wrap=True)
            raise typer.Exit(EXIT_CODE)
        except JSONParsingError as e:
            err_console.print(format_error_message("JSON Parsing Error", str(e)), soft_wrap=True)
            raise typer.Exit(EXIT_CODE)
        except MynlError as e:
            err_console.print(format_error_message("Error", str(e)), soft_wrap=True)
            raise typer.Exit(EXIT_CODE)

    return cast(F, wrapper)
