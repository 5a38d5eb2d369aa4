import unittest

import cachematrix
from cachematrix import InversionOptions, _version
from cachematrix._internal.options import DEFAULT_WARN_CONDITION
from cachematrix._internal.runtime import Runtime


class TestRuntimeDefaults(unittest.TestCase):
    def test_empty_environment_gives_plain_defaults(self):
        opts = Runtime(environ={}).default_options()
        self.assertEqual(opts, InversionOptions())
        self.assertEqual(opts.warn_condition, DEFAULT_WARN_CONDITION)

    def test_environment_overrides(self):
        env = {
            "CACHEMATRIX_METHOD": "Solve",
            "CACHEMATRIX_MAX_CONDITION": "1e10",
            "CACHEMATRIX_WARN_CONDITION": "1e8",
        }
        opts = Runtime(environ=env).default_options()
        self.assertEqual(opts.method, "solve")
        self.assertEqual(opts.max_condition, 1e10)
        self.assertEqual(opts.warn_condition, 1e8)

    def test_blank_values_fall_back_to_defaults(self):
        env = {"CACHEMATRIX_METHOD": "", "CACHEMATRIX_MAX_CONDITION": "  "}
        opts = Runtime(environ=env).default_options()
        self.assertEqual(opts.method, "inv")
        self.assertIsNone(opts.max_condition)

    def test_malformed_number_names_the_variable(self):
        with self.assertRaises(ValueError) as ctx:
            Runtime(environ={"CACHEMATRIX_MAX_CONDITION": "lots"}).default_options()
        self.assertIn("CACHEMATRIX_MAX_CONDITION", str(ctx.exception))

    def test_unknown_method_is_rejected(self):
        with self.assertRaises(ValueError) as ctx:
            Runtime(environ={"CACHEMATRIX_METHOD": "qr"}).default_options()
        self.assertIn("CACHEMATRIX_METHOD", str(ctx.exception))

    def test_custom_variable_names(self):
        rt = Runtime(method_env="MY_METHOD", environ={"MY_METHOD": "pinv", "CACHEMATRIX_METHOD": "lu"})
        self.assertEqual(rt.default_options().method, "pinv")


class TestPackageVersion(unittest.TestCase):
    def test_version_comes_from_version_module(self):
        self.assertEqual(cachematrix.__version__, _version.version)
        self.assertNotEqual(cachematrix.__version__, "unknown")


if __name__ == "__main__":
    unittest.main()
