"""
Tests for API exceptions and error handlers.
"""

import unittest
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.error_handlers import (
    format_validation_errors,
    register_exception_handlers,
    report_to_sentry,
    sanitize_details,
    sanitize_error_message,
)
from app.exceptions import (
    ErrorCode,
    PreviewRenderError,
    ResourceNotFoundError,
    ToolCatalogException,
    category_not_found,
    tool_not_found,
)
from toolcatalog.seo import InvalidPathError


class TestExceptions(unittest.TestCase):
    def test_base_defaults(self):
        exc = ToolCatalogException()
        self.assertEqual(exc.status_code, 500)
        self.assertEqual(exc.error_code, ErrorCode.INTERNAL_ERROR)
        self.assertEqual(
            exc.to_dict(),
            {"success": False, "error": "An unexpected error occurred", "error_code": "INTERNAL_ERROR"},
        )

    def test_not_found_helpers(self):
        exc = tool_not_found("nope")
        self.assertIsInstance(exc, ResourceNotFoundError)
        self.assertEqual(exc.status_code, 404)
        self.assertEqual(exc.error_code, ErrorCode.TOOL_NOT_FOUND)
        self.assertEqual(exc.details, {"resource_type": "tool", "resource_id": "nope"})
        self.assertEqual(category_not_found("x").error_code, ErrorCode.CATEGORY_NOT_FOUND)

    def test_render_error(self):
        exc = PreviewRenderError(kind="category", slug="writing", internal_message="bad font")
        self.assertEqual(exc.status_code, 500)
        self.assertEqual(exc.error_code, ErrorCode.RENDER_FAILED)
        self.assertEqual(exc.details, {"kind": "category", "slug": "writing"})
        self.assertNotIn("bad font", str(exc.to_dict()))

    def test_repr(self):
        self.assertIn("TOOL_NOT_FOUND", repr(tool_not_found("a")))


class TestSanitization(unittest.TestCase):
    def test_font_path_removed(self):
        message = "Cannot load font '/usr/share/fonts/Inter-Bold.ttf' at size 60"
        self.assertNotIn("/usr/share", sanitize_error_message(message))

    def test_long_message_truncated(self):
        self.assertTrue(sanitize_error_message("x" * 600).endswith("..."))

    def test_plain_message_unchanged(self):
        self.assertEqual(sanitize_error_message("Tool not found: x"), "Tool not found: x")

    def test_details_whitelist(self):
        details = {"resource_type": "tool", "internal": "secret"}
        self.assertEqual(sanitize_details(details), {"resource_type": "tool"})

    def test_validation_error_format(self):
        errors = [
            {"loc": ("query", "limit"), "type": "greater_than_equal", "msg": "Input should be >= 1"},
            {"loc": ("path", "slug"), "type": "missing", "msg": "Field required"},
        ]
        formatted = format_validation_errors(errors)
        self.assertEqual(formatted[0], {"field": "query.limit", "message": "Input should be >= 1"})
        self.assertEqual(formatted[1]["message"], "Field 'path.slug' is required")


class TestSentryReporting(unittest.TestCase):
    def test_inactive_client_returns_none(self):
        self.assertIsNone(report_to_sentry(RuntimeError("boom")))

    @patch("app.error_handlers.sentry_sdk")
    def test_active_client_captures(self, sentry):
        sentry.get_client.return_value.is_active.return_value = True
        sentry.capture_exception.return_value = "event-1"
        self.assertEqual(report_to_sentry(RuntimeError("boom")), "event-1")


class TestHandlers(unittest.TestCase):
    def setUp(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/missing")
        async def missing():
            raise tool_not_found("ghost")

        @app.get("/bad-path")
        async def bad_path():
            raise InvalidPathError("relative/path")

        @app.get("/crash")
        async def crash():
            raise RuntimeError("unexpected")

        self.client = TestClient(app, raise_server_exceptions=False)

    def test_catalog_exception(self):
        response = self.client.get("/missing")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error_code"], "TOOL_NOT_FOUND")

    def test_invalid_path(self):
        response = self.client.get("/bad-path")
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["error_code"], "INVALID_PATH")
        self.assertEqual(body["details"], {"path": "relative/path"})

    def test_unhandled_exception(self):
        response = self.client.get("/crash")
        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertEqual(body["error_code"], "INTERNAL_ERROR")
        self.assertIn("error_reference", body["details"])
        self.assertNotIn("unexpected", body["error"])
