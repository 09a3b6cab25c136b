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

import unittest

from pyoptions.common.options.options_exception import (BadMethodCallException,
                                                         InvalidArgumentException,
                                                         NoSuchGetterException,
                                                         NoSuchSetterException,
                                                         OptionsException,
                                                         RecursiveSetterException)


class OptionsExceptionTest(unittest.TestCase):

    def test_setter_message(self):
        e = NoSuchSetterException("foo_bar", "setFooBar")
        self.assertEqual(e.key, "foo_bar")
        self.assertEqual(e.method, "setFooBar")
        self.assertEqual(
            str(e),
            'The option "foo_bar" does not have a matching setFooBar setter method which must be defined')

    def test_getter_message(self):
        e = NoSuchGetterException("foo_bar", "getFooBar")
        self.assertEqual(
            str(e),
            'The option "foo_bar" does not have a matching getFooBar getter method which must be defined')

    def test_hierarchy(self):
        self.assertTrue(issubclass(NoSuchSetterException, BadMethodCallException))
        self.assertTrue(issubclass(NoSuchGetterException, BadMethodCallException))
        self.assertTrue(issubclass(BadMethodCallException, AttributeError))
        self.assertTrue(issubclass(BadMethodCallException, OptionsException))
        self.assertTrue(issubclass(InvalidArgumentException, ValueError))
        self.assertTrue(issubclass(InvalidArgumentException, OptionsException))
        self.assertFalse(issubclass(InvalidArgumentException, BadMethodCallException))

    def test_recursive_setter(self):
        e = RecursiveSetterException("foo", "setFoo")
        self.assertEqual(e.key, "foo")
        self.assertEqual(e.method, "setFoo")
        self.assertIn("self._foo", str(e))
        self.assertIsInstance(e, OptionsException)
        self.assertIsInstance(e, RuntimeError)
        self.assertNotIsInstance(e, RecursionError)


if __name__ == '__main__':
    unittest.main()
