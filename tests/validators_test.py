# =============================================
# tests/validators_test.py
# =============================================
import unittest

from trainhub.core.validators import (
    PERSONAL_EMAIL_MESSAGE,
    EMAIL_FORMAT_MESSAGE,
    EMAIL_REQUIRED_MESSAGE,
    is_restricted_domain,
    is_valid_email_format,
    parse_skills,
    serialize_skills,
    validate_email_domain,
    validate_password,
)


class TestValidateEmailDomain(unittest.TestCase):
    def test_personal_provider_is_rejected(self):
        result = validate_email_domain("user@gmail.com")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.error, PERSONAL_EMAIL_MESSAGE)

    def test_domain_match_ignores_case(self):
        self.assertFalse(validate_email_domain("Someone@Outlook.COM").is_valid)
        self.assertTrue(is_restricted_domain("boss@ENGINEER.com"))

    def test_company_domain_is_accepted(self):
        result = validate_email_domain("user@company.io")

        self.assertTrue(result.is_valid)
        self.assertIsNone(result.error)

    def test_subdomain_of_provider_is_not_restricted(self):
        self.assertTrue(validate_email_domain("team@corp.gmail.com.example").is_valid)

    def test_malformed_address_has_its_own_message(self):
        result = validate_email_domain("not-an-email")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.error, EMAIL_FORMAT_MESSAGE)
        self.assertNotEqual(result.error, PERSONAL_EMAIL_MESSAGE)

    def test_empty_address(self):
        self.assertEqual(validate_email_domain("").error, EMAIL_REQUIRED_MESSAGE)
        self.assertEqual(validate_email_domain(None).error, EMAIL_REQUIRED_MESSAGE)


class TestEmailFormat(unittest.TestCase):
    def test_format(self):
        self.assertTrue(is_valid_email_format("contact@acme.org"))
        self.assertFalse(is_valid_email_format("contact@acme"))
        self.assertFalse(is_valid_email_format("con tact@acme.org"))
        self.assertFalse(is_valid_email_format(None))


class TestValidatePassword(unittest.TestCase):
    def test_short_password(self):
        self.assertEqual(
            validate_password("abc", 6),
            "Password must be at least 6 characters long"
        )

    def test_missing_password(self):
        self.assertIsNotNone(validate_password(None))

    def test_long_enough(self):
        self.assertIsNone(validate_password("abcdef", 6))


class TestSkills(unittest.TestCase):
    def test_parse_json_array(self):
        self.assertEqual(parse_skills('["a","b"]'), ["a", "b"])

    def test_parse_comma_separated(self):
        self.assertEqual(parse_skills("a, b ,c"), ["a", "b", "c"])

    def test_parse_empty_values(self):
        self.assertEqual(parse_skills(None), [])
        self.assertEqual(parse_skills(""), [])
        self.assertEqual(parse_skills("[]"), [])

    def test_parse_drops_blank_tokens(self):
        self.assertEqual(parse_skills("python,, ,sql"), ["python", "sql"])
        self.assertEqual(parse_skills(["go", " ", None, "rust "]), ["go", "rust"])

    def test_parse_single_word(self):
        self.assertEqual(parse_skills("Python"), ["Python"])

    def test_serialize_writes_json(self):
        self.assertEqual(serialize_skills("a, b"), '["a", "b"]')
        self.assertEqual(serialize_skills(["x"]), '["x"]')
        self.assertEqual(serialize_skills(None), "[]")


if __name__ == "__main__":
    unittest.main()
