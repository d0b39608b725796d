__all__ = ["TypenameTest"]

import unittest
from intrange.utils import *

class TypenameTest(unittest.TestCase):
    class Inner:
        pass

    def test_the_name_of_an_object_is_the_name_of_its_class(self):
        self.assertEqual(typename(self.Inner()), "Inner")

    def test_the_name_of_a_class_is_its_own_name(self):
        self.assertEqual(typename(self.Inner), "Inner")

    def test_qualified_name_includes_module_and_enclosing_class(self):
        self.assertEqual(
            typename(self.Inner(), qualified=True),
            f"{__name__}.TypenameTest.Inner",
        )

if __name__ == '__main__':
    unittest.main()
