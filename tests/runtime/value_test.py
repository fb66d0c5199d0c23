import math
import unittest

from lox.runtime.value import is_equal, is_truthy, stringify


class ValueTestCase(unittest.TestCase):

    def test_is_truthy(self):
        should_be_falsy = [None, False]
        for case in should_be_falsy:
            self.assertFalse(is_truthy(case), case)

        should_be_truthy = [True, 0.0, -0.0, "", "false", math.nan]
        for case in should_be_truthy:
            self.assertTrue(is_truthy(case), case)

    def test_is_equal(self):
        should_be_equal = [(None, None), (1.0, 1.0), ("a", "a"), (True, True), (0.0, -0.0)]
        for left, right in should_be_equal:
            self.assertTrue(is_equal(left, right), (left, right))

        should_not_be_equal = [(1.0, True), (0.0, False), (None, False), ("1", 1.0), ("", None), (math.nan, math.nan)]
        for left, right in should_not_be_equal:
            self.assertFalse(is_equal(left, right), (left, right))
            self.assertFalse(is_equal(right, left), (right, left))

    def test_stringify(self):
        should_pass = {
            None: "nil", True: "true", False: "false", 7.0: "7", 2.5: "2.5", -3.0: "-3",
            math.inf: "inf", -math.inf: "-inf", "text": "text", "": "",
        }
        for case, result in should_pass.items():
            self.assertEqual(stringify(case), result, case)
        self.assertEqual(stringify(math.nan), "NaN")
        self.assertEqual(stringify(-0.0), "-0")  # kept out of the dict: -0.0 == False


if __name__ == '__main__':
    unittest.main()
