from django.db import DatabaseError
from django.test import SimpleTestCase
from rest_framework import exceptions as drf_exceptions

from shelter.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    ValidationError,
    domain_exception_handler,
)


class DomainExceptionHandlerTests(SimpleTestCase):
    def test_domain_errors_map_to_status_codes(self):
        cases = [
            (ValidationError("bad input", {"field": ["required"]}), 422, "VALIDATION_ERROR"),
            (InvalidTransitionError("no"), 422, "INVALID_TRANSITION"),
            (NotFoundError("missing"), 404, "NOT_FOUND"),
            (PermissionDeniedError("nope"), 403, "FORBIDDEN"),
            (PersistenceError("db"), 500, "PERSISTENCE_ERROR"),
        ]
        for exc, status_code, code in cases:
            with self.subTest(code=code):
                response = domain_exception_handler(exc, {})
                self.assertEqual(response.status_code, status_code)
                self.assertEqual(response.data["code"], code)
                self.assertFalse(response.data["success"])
                self.assertEqual(response.data["message"], exc.message)

    def test_details_become_errors(self):
        response = domain_exception_handler(
            ValidationError("bad input", {"field": ["required"]}), {}
        )
        self.assertEqual(response.data["errors"], {"field": ["required"]})

    def test_database_error_becomes_persistence_error(self):
        with self.assertLogs("shelter.exceptions", level="ERROR"):
            response = domain_exception_handler(DatabaseError("disk full"), {})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["code"], "PERSISTENCE_ERROR")

    def test_drf_field_errors_become_422(self):
        exc = drf_exceptions.ValidationError({"status": ["This field is required."]})
        response = domain_exception_handler(exc, {})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.data["code"], "VALIDATION_ERROR")
        self.assertIn("status", response.data["errors"])

    def test_drf_detail_errors_keep_status(self):
        response = domain_exception_handler(drf_exceptions.NotAuthenticated(), {})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["code"], "NOT_AUTHENTICATED")

    def test_unhandled_exception_is_500(self):
        with self.assertLogs("shelter.exceptions", level="ERROR"):
            response = domain_exception_handler(RuntimeError("boom"), {})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["code"], "INTERNAL_ERROR")
