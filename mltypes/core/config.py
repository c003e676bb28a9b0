"""
Runtime options for mltypes.

A single frozen Options record holds process-wide settings. Change it with
set_options() or, scoped, with option_context(); read it with get_options().

Usage:
    from mltypes.core import config

    config.set_options(seed=1234)          # reproducible random fills

    with config.option_context(default_dtype='float32'):
        v = Vector.zeros(3)                # float32

    with config.unchecked():
        c = a + b                          # dimension pre-checks skipped

Options:
    check_dimensions: Validate operand shapes before every operation.
        When False, invalid shapes are undefined behaviour: numpy may
        raise its own ValueError or broadcast. Index bounds are always
        checked.
    default_dtype: Element type used by constructors that cannot infer
        one (zeros, random, ...).
    seed: Seed for the shared random generator; None draws fresh entropy.
"""

from __future__ import annotations

import dataclasses
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from mltypes.core.exceptions import ValidationError


@dataclass(frozen=True)
class Options:
    """Process-wide mltypes settings."""
    check_dimensions: bool = True
    default_dtype: str = 'float64'
    seed: int | None = None


_options = Options()
_rng = np.random.default_rng(_options.seed)


def get_options() -> Options:
    """Return the current options."""
    return _options


def set_options(**changes: Any) -> Options:
    """
    Update one or more options.

    Setting 'seed' (even to its current value) re-creates the shared
    random generator.

    Args:
        **changes: Option names and their new values

    Returns:
        The previous Options, for restoring later

    Raises:
        ValidationError: If an option name is unknown or a value invalid
    """
    global _options, _rng

    known = {f.name for f in dataclasses.fields(Options)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ValidationError(
            f"unknown option(s) {unknown}; valid options: {sorted(known)}"
        )

    if 'default_dtype' in changes:
        # Deferred: scalars imports this module.
        from mltypes.core.scalars import scalar_type
        changes['default_dtype'] = scalar_type(changes['default_dtype']).name

    if 'seed' in changes and changes['seed'] is not None:
        if isinstance(changes['seed'], bool) or not isinstance(changes['seed'], int):
            raise ValidationError(f"seed: expected int or None, got {changes['seed']!r}")

    previous = _options
    _options = dataclasses.replace(_options, **changes)
    if 'seed' in changes:
        _rng = np.random.default_rng(_options.seed)
    return previous


@contextmanager
def option_context(**changes: Any) -> Iterator[Options]:
    """
    Temporarily change options inside a with-block.

    The previous options are restored on exit, including on error. The
    random generator is not rewound.
    """
    global _options
    previous = set_options(**changes)
    try:
        yield _options
    finally:
        _options = previous


@contextmanager
def unchecked() -> Iterator[Options]:
    """Skip dimension pre-checks inside a with-block."""
    with option_context(check_dimensions=False) as options:
        yield options


def checks_enabled() -> bool:
    return _options.check_dimensions


def default_rng() -> np.random.Generator:
    """Return the shared random generator used by random fills."""
    return _rng


__all__ = [
    'Options',
    'get_options',
    'set_options',
    'option_context',
    'unchecked',
    'checks_enabled',
    'default_rng',
]
