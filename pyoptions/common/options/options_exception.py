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


class OptionsException(Exception):
    """Base options exception"""


class InvalidArgumentException(OptionsException, ValueError):
    """Invalid argument passed to an options operation"""


class BadMethodCallException(OptionsException, AttributeError):
    """An option has no matching accessor method"""

    KIND = "accessor"

    def __init__(self, key: str, method: str):
        self.key = key
        self.method = method
        super().__init__(
            f'The option "{key}" does not have a matching {method} '
            f'{self.KIND} method which must be defined')


class NoSuchSetterException(BadMethodCallException):
    """Setter not exist exception"""

    KIND = "setter"


class NoSuchGetterException(BadMethodCallException):
    """Getter not exist exception"""

    KIND = "getter"


class RecursiveSetterException(OptionsException, RuntimeError):
    """Setter re-entered while setting the same option"""

    def __init__(self, key: str, method: str):
        self.key = key
        self.method = method
        super().__init__(
            f'The option "{key}" was set again from within {method}. Assigning '
            f'self.{key} dispatches back to {method}, store the value in self._{key} instead')
