"""
Recourse - recoverable computations without exceptions.

- recourse.core: Outcome and Maybe containers, errors, logging, settings
- recourse.domain: Guarded 64-bit arithmetic built on the containers
- recourse.walkthrough: Guided tour of every combinator
- recourse.cli: Typer front end
"""

__version__ = "0.1.0"

from recourse.core import *  # noqa
