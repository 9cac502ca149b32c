import unittest
from rest_framework import status
from apps.api.utils import error_response, parse_path_id, status_for_code


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping(self):
        resp = error_response("NOT_FOUND", "Product not found")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data, {"error": "Product not found"})

    def test_unknown_code_defaults_to_bad_request(self):
        resp = error_response("SOMETHING_ELSE", "nope")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_code_lookup_is_case_insensitive(self):
        self.assertEqual(status_for_code(" not_found "), status.HTTP_404_NOT_FOUND)

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"], "oops")

    def test_message_is_stripped(self):
        resp = error_response("VALIDATION_ERROR", "  bad input ")
        self.assertEqual(resp.data, {"error": "bad input"})

    def test_headers_are_attached(self):
        resp = error_response(
            "METHOD_NOT_ALLOWED", "Method not allowed", headers={"Allow": "GET"}
        )
        self.assertEqual(resp["Allow"], "GET")

    def test_rejects_blank_message(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "   ")

    def test_rejects_non_string_code(self):
        with self.assertRaises(TypeError):
            error_response(404, "missing")

    def test_rejects_invalid_status(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "missing", http_status=999)


class ParsePathIdTests(unittest.TestCase):
    def test_integer_segments(self):
        self.assertEqual(parse_path_id("7"), 7)
        self.assertEqual(parse_path_id("-1"), -1)

    def test_non_integer_segments(self):
        self.assertIsNone(parse_path_id("abc"))
        self.assertIsNone(parse_path_id("1.5"))
        self.assertIsNone(parse_path_id(""))
