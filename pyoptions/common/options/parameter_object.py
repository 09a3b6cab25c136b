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

from abc import ABC, abstractmethod
from typing import Any


class ParameterObject(ABC):
    """
    An object whose parameters are read and written by key, through
    accessor methods instead of direct attribute access.
    """

    @abstractmethod
    def set(self, key: str, value: Any):
        """
        Sets the parameter with the given key.
        """

    @abstractmethod
    def get(self, key: str) -> Any:
        """
        Returns the value of the parameter with the given key.
        """

    @abstractmethod
    def isset(self, key: str) -> bool:
        """
        Checks whether the parameter with the given key holds a non-None value.
        """

    @abstractmethod
    def unset(self, key: str):
        """
        Clears the parameter with the given key.
        """
