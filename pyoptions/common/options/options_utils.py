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

import re

_WORD_SEPARATOR = re.compile(r"[_ ]")
_UPPER_LETTER = re.compile(r"([A-Z])")


class OptionsUtils:
    """Utility methods for mapping option keys to accessor names and back."""

    SETTER_PREFIX = "set"
    GETTER_PREFIX = "get"

    @staticmethod
    def setter_name(key: str) -> str:
        """
        Compute the setter method name for an option key.

        Args:
            key: The option key, words separated by underscores or spaces

        Returns:
            The setter name, e.g. 'setFooBar' for 'foo_bar'
        """
        return OptionsUtils.SETTER_PREFIX + OptionsUtils.to_camel_words(key)

    @staticmethod
    def getter_name(key: str) -> str:
        """
        Compute the getter method name for an option key.

        Args:
            key: The option key, words separated by underscores or spaces

        Returns:
            The getter name, e.g. 'getFooBar' for 'foo_bar'
        """
        return OptionsUtils.GETTER_PREFIX + OptionsUtils.to_camel_words(key)

    @staticmethod
    def to_camel_words(key: str) -> str:
        """Uppercase the first letter of every word and join them."""
        return "".join(word[:1].upper() + word[1:] for word in _WORD_SEPARATOR.split(str(key)))

    @staticmethod
    def to_snake_case(name: str) -> str:
        """Convert a camelCase name to snake_case."""
        return _UPPER_LETTER.sub(lambda match: "_" + match.group(1).lower(), name)

    @staticmethod
    def field_key(attribute: str) -> str:
        """
        Convert the name of an attribute holding an option value to its option key.

        Option values are stored in attributes with a leading underscore,
        which is dropped. So is the underscore the conversion puts in front
        of a leading capital, e.g. '_FooBar' gives 'foo_bar'.
        """
        if attribute.startswith("_"):
            attribute = attribute[1:]
        key = OptionsUtils.to_snake_case(attribute)
        return key[1:] if key.startswith("_") else key
