"""
Licensed to the Apache Software Foundation (ASF) under one
or more contributor license agreements.  See the NOTICE file
distributed with this work for additional information
regarding copyright ownership.  The ASF licenses this file
to you under the Apache License, Version 2.0 (the
"License"); you may not use this file except in compliance
with the License.  You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import logging
from abc import ABC
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from pyoptions.common.options.options_exception import (InvalidArgumentException,
                                                         NoSuchGetterException,
                                                         NoSuchSetterException,
                                                         RecursiveSetterException)
from pyoptions.common.options.options_utils import OptionsUtils
from pyoptions.common.options.parameter_object import ParameterObject

logger = logging.getLogger(__name__)


class AbstractOptions(ParameterObject, ABC):
    """
    Base class for option objects populated from a mapping of option keys.

    Every option key maps to a pair of accessor methods on the concrete class:
    'foo_bar' (or 'foo bar') is written through setFooBar(value) and read
    through getFooBar(). Option values are stored in attributes with a leading
    underscore, e.g. self._foo_bar, or declared as class-level defaults such
    as _timeout = 30, and exported back to snake_case keys by to_dict().
    A setter must not assign the public name of its own option (self.foo_bar),
    as that dispatches back to the setter and raises RecursiveSetterException.

    Attribute access is routed through the accessors as well:

        options.foo_bar = 1      # options.set('foo_bar', 1)
        options.foo_bar          # options.get('foo_bar')
        del options.foo_bar      # options.unset('foo_bar')

    In strict mode, which is the default, setting an option without a setter
    raises NoSuchSetterException. Otherwise the option is ignored. Subclasses
    can turn strict mode off by overriding __strict_mode__.
    """

    # Excluded from to_dict()
    __strict_mode__ = True

    # Set by ABCMeta on every class
    _INTERNAL_ATTRIBUTES = ("_abc_impl",)

    def __init__(self, options: Optional[Union[Mapping, Iterable]] = None):
        if options is not None:
            self.set_from_dict(options)

    @classmethod
    def from_dict(cls, data: Union[Mapping, Iterable]) -> 'AbstractOptions':
        return cls(data)

    def is_strict_mode(self) -> bool:
        return self.__strict_mode__

    def set_strict_mode(self, strict_mode: bool) -> 'AbstractOptions':
        self.__strict_mode__ = bool(strict_mode)
        return self

    def set_from_dict(self, options: Union[Mapping, Iterable]) -> 'AbstractOptions':
        """
        Set options from a mapping or an iterable of (key, value) pairs.

        Pairs are applied in iteration order, so a setter may rely on options
        given before it.

        Args:
            options: A mapping, an iterable of pairs or another AbstractOptions

        Returns:
            This object, for chaining

        Raises:
            InvalidArgumentException: If options is neither a mapping nor an
                iterable of pairs
        """
        if isinstance(options, (str, bytes)) or not isinstance(options, (Mapping, Iterable)):
            raise InvalidArgumentException(
                f"Parameter provided to {type(self).__name__}.set_from_dict must be "
                f"a mapping or an iterable of key/value pairs, got {type(options).__name__}")

        items = options.items() if isinstance(options, Mapping) else options
        count = 0
        for item in items:
            try:
                key, value = item
            except (TypeError, ValueError) as e:
                raise InvalidArgumentException(
                    f"Parameter provided to {type(self).__name__}.set_from_dict must yield "
                    f"key/value pairs, got {item!r}") from e
            self.set(key, value)
            count += 1

        logger.debug("Set %d options on %s", count, type(self).__name__)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the option values of this object, keyed in snake_case.

        Class-level defaults declared by subclasses come first, base classes
        before derived ones, followed by attributes set on the instance.
        Instance values override class defaults.
        """
        fields = {}
        for klass in reversed(type(self).__mro__):
            if klass is AbstractOptions or not issubclass(klass, AbstractOptions):
                continue
            for attribute, value in vars(klass).items():
                if not attribute.startswith("_") or attribute in self._INTERNAL_ATTRIBUTES:
                    continue
                if callable(value) or isinstance(value, (staticmethod, classmethod, property)):
                    continue
                fields[attribute] = value
        fields.update(vars(self))

        result = {}
        for attribute, value in fields.items():
            if attribute.startswith("__") and attribute.endswith("__"):
                continue
            result[OptionsUtils.field_key(attribute)] = value
        return result

    def set(self, key: str, value: Any):
        setter = OptionsUtils.setter_name(key)
        if not self._has_method(setter):
            if self.__strict_mode__:
                raise NoSuchSetterException(key, setter)
            logger.debug("Ignoring option '%s', %s defines no %s method",
                         key, type(self).__name__, setter)
            return

        # Bypass __getattr__, the set holds setters currently running
        in_progress = self.__dict__.setdefault("__setters_in_progress__", set())
        if setter in in_progress:
            raise RecursiveSetterException(key, setter)
        in_progress.add(setter)
        try:
            getattr(self, setter)(value)
        finally:
            in_progress.discard(setter)

    def get(self, key: str) -> Any:
        getter = OptionsUtils.getter_name(key)
        if not self._has_method(getter):
            raise NoSuchGetterException(key, getter)
        return getattr(self, getter)()

    def isset(self, key: str) -> bool:
        # A missing getter raises instead of returning False, see has()
        return self.get(key) is not None

    def has(self, key: str) -> bool:
        """Like isset(), but returns False when the option has no getter."""
        if not self._has_method(OptionsUtils.getter_name(key)):
            return False
        return self.isset(key)

    def unset(self, key: str):
        try:
            self.set(key, None)
        except NoSuchSetterException as e:
            raise InvalidArgumentException(
                f"The option '{key}' cannot be unset as None is an invalid value for it") from e

    def _has_method(self, name: str) -> bool:
        # Methods of this class, e.g. 'set' for an empty key, are never accessors
        if hasattr(AbstractOptions, name):
            return False
        return callable(getattr(type(self), name, None))

    def __getattr__(self, name: str) -> Any:
        # Only reached when regular lookup fails
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return self.get(name)

    def __setattr__(self, name: str, value: Any):
        if name.startswith("_"):
            super().__setattr__(name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str):
        if name.startswith("_"):
            super().__delattr__(name)
        else:
            self.unset(name)

    def __contains__(self, key: str) -> bool:
        return self.isset(key)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self.to_dict().items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
