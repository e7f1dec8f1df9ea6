#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tagdown library.

This module defines specialized exception classes for the error conditions
that can occur while turning HTML into Markdown. A successfully parsed tree
never fails mid-traversal; only input handling, the parser backend and the
nesting-depth guard can raise.

Exception Hierarchy
-------------------
- TagdownError (base exception)

  - ParsingError (input cannot be turned into a document tree)

  - DependencyError (selected parser backend is not installed)

  - DepthExceededError (document nested deeper than allowed)

"""


class TagdownError(Exception):
    """Base exception class for all tagdown-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ParsingError(TagdownError):
    """Exception raised when the input cannot be parsed into a document tree.

    No partial output is ever returned alongside this error.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
        (e.g. ``"input_validation"``, ``"html_parsing"``)
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DependencyError(TagdownError):
    """Exception raised when the selected BeautifulSoup backend is unavailable.

    Parameters
    ----------
    parser_name : str
        Name of the parser backend that could not be loaded
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception raised by BeautifulSoup

    """

    def __init__(
        self,
        parser_name: str,
        missing_packages: list[tuple[str, str]],
        install_command: str = "",
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            message = f"HTML parser backend '{parser_name}' is not available"
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message += f"; it requires the following packages: {pkg_list}"
                if not install_command:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
                    install_command = f"pip install {packages_str}"
            if install_command:
                message += f"\nInstall with: {install_command}"

        super().__init__(message, original_error)
        self.parser_name = parser_name
        self.missing_packages = missing_packages
        self.install_command = install_command


class DepthExceededError(TagdownError):
    """Exception raised when a document is nested deeper than the configured limit.

    Parameters
    ----------
    max_depth : int or None
        The limit that was exceeded, or None when the interpreter's own
        recursion limit was hit
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception (typically RecursionError)

    """

    def __init__(self, max_depth: int | None, message: str | None = None, original_error: Exception | None = None):
        """Initialize the depth error."""
        if message is None:
            if max_depth is None:
                message = "Document nesting exceeds the interpreter recursion limit"
            else:
                message = f"Document nesting exceeds the maximum depth of {max_depth} elements"
        super().__init__(message, original_error)
        self.max_depth = max_depth
