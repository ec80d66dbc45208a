from unittest.mock import MagicMock

from django.test import SimpleTestCase
from rest_framework import exceptions as drf_exceptions

from recipes.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    api_exception_handler,
)


class ExceptionTests(SimpleTestCase):
    def test_status_codes_and_defaults(self):
        self.assertEqual((NotFoundError().status_code, NotFoundError().message), (404, "Recipe not found"))
        self.assertEqual(AuthorizationError().status_code, 403)
        self.assertEqual(ConflictError().status_code, 409)
        self.assertEqual(ValidationError().status_code, 400)

    def test_custom_message(self):
        self.assertEqual(NotFoundError("User not found").message, "User not found")

    def test_flattens_nested_serializer_errors(self):
        error = ValidationError.from_serializer_errors({
            "title": ["This field is required."],
            "ingredients": [{}, {"unit": ["This field is required."]}],
            "instructions": {"non_field_errors": ["This list may not be empty."]},
        })
        self.assertEqual(error.errors, [
            {"field": "title", "message": "This field is required."},
            {"field": "ingredients[1].unit", "message": "This field is required."},
            {"field": "instructions", "message": "This list may not be empty."},
        ])


class ExceptionHandlerTests(SimpleTestCase):
    def setUp(self):
        self.context = {"view": MagicMock()}

    def test_validation_error_body(self):
        exc = ValidationError(errors=[{"field": "rating", "message": "bad"}])
        response = api_exception_handler(exc, self.context)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {"message": "Validation failed", "errors": [{"field": "rating", "message": "bad"}]})

    def test_drf_validation_error_is_normalised(self):
        response = api_exception_handler(drf_exceptions.ValidationError({"limit": ["bad"]}), self.context)
        self.assertEqual(response.data["errors"], [{"field": "limit", "message": "bad"}])

    def test_domain_error_body(self):
        response = api_exception_handler(ConflictError(), self.context)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data, {"message": "Concurrent update detected, please retry"})

    def test_unexpected_error_is_logged_as_500(self):
        with self.assertLogs("recipes.exceptions", level="ERROR"):
            response = api_exception_handler(RuntimeError("db down"), self.context)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {"message": "Server error"})
