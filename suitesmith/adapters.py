# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Reshape the models handed to a generator into a single root model.

One model is renamed to the suite name; several models become the inner
classes of a synthetic container named after the suite.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from suitesmith.errors import EmptySuiteError
from suitesmith.models import MethodModel, TestClassModel

logger = logging.getLogger(__name__)


class RenamedTestClassModel:
    """Forwards everything to the wrapped model except ``name``."""

    def __init__(self, delegate: TestClassModel, name: str):
        self._delegate = delegate
        self._name = name

    @property
    def delegate(self) -> TestClassModel:
        return self._delegate

    @property
    def name(self) -> str:
        return self._name

    @property
    def methods(self) -> Sequence[MethodModel]:
        return self._delegate.methods

    @property
    def inner_test_classes(self) -> Sequence[TestClassModel]:
        return self._delegate.inner_test_classes

    @property
    def data_string(self) -> Optional[str]:
        return self._delegate.data_string

    @property
    def data_path_root(self) -> Optional[str]:
        return self._delegate.data_path_root

    def is_empty(self) -> bool:
        return self._delegate.is_empty()

    def __repr__(self) -> str:
        return f"RenamedTestClassModel({self._delegate!r}, name={self._name!r})"


@dataclass(frozen=True)
class AggregateTestClassModel:
    """Synthetic suite root holding several models as inner classes.

    Never empty and never annotated, so the suite class always appears even
    when every child turns out to be empty.
    """
    name: str
    inner_test_classes: tuple[TestClassModel, ...]

    def __post_init__(self):
        object.__setattr__(self, "inner_test_classes", tuple(self.inner_test_classes))

    @property
    def methods(self) -> tuple[MethodModel, ...]:
        return ()

    @property
    def data_string(self) -> Optional[str]:
        return None

    @property
    def data_path_root(self) -> Optional[str]:
        return None

    def is_empty(self) -> bool:
        return False


def wrap_test_class_models(name: str, models: Sequence[TestClassModel]) -> TestClassModel:
    """Build the root model for a suite.

    Args:
        name: Suite class name the root model takes
        models: Models supplied to the generator, in emission order

    Returns:
        RenamedTestClassModel for a single model, AggregateTestClassModel otherwise

    Raises:
        EmptySuiteError: If no models were supplied
    """
    models = tuple(models)
    if not models:
        raise EmptySuiteError(f"No test class models supplied for suite '{name}'")

    if len(models) == 1:
        logger.debug(f"Renaming single model '{models[0].name}' to '{name}'")
        return RenamedTestClassModel(models[0], name)

    logger.debug(f"Aggregating {len(models)} models under '{name}'")
    return AggregateTestClassModel(name=name, inner_test_classes=models)
