import json
import unittest

from services.financial_profile import financial_summary, get_loan_history, read_field
from services.profile_parser import ProfileParseError, parse_profile


class TestParseProfile(unittest.TestCase):
    def test_parses_json_object(self):
        raw = json.dumps({"MonthlyIncome": 5000, "loanHistory": [{"status": "paid"}]}).encode()
        self.assertEqual(
            parse_profile(raw),
            {"MonthlyIncome": 5000, "loanHistory": [{"status": "paid"}]},
        )

    def test_no_fields_are_required(self):
        self.assertEqual(parse_profile(b"{}"), {})

    def test_utf8_bom_is_tolerated(self):
        self.assertEqual(parse_profile(b'\xef\xbb\xbf{"a": 1}'), {"a": 1})

    def test_rejects_malformed_json(self):
        for raw in (b"", b"{", b"not json", b'{"a": 1,}', b"{'a': 1}"):
            with self.subTest(raw=raw):
                with self.assertRaises(ProfileParseError):
                    parse_profile(raw)

    def test_rejects_non_standard_constants(self):
        with self.assertRaises(ProfileParseError):
            parse_profile(b'{"MonthlyIncome": NaN}')
        with self.assertRaises(ProfileParseError):
            parse_profile(b'{"MonthlyIncome": Infinity}')

    def test_rejects_non_object_documents(self):
        for raw in (b"[1, 2]", b"42", b'"text"', b"null"):
            with self.subTest(raw=raw):
                with self.assertRaises(ProfileParseError):
                    parse_profile(raw)

    def test_rejects_deeply_nested_document(self):
        depth = 100000
        raw = b'{"a":' + b"[" * depth + b"]" * depth + b"}"
        with self.assertRaises(ProfileParseError):
            parse_profile(raw)

    def test_rejects_invalid_utf8(self):
        with self.assertRaises(ProfileParseError):
            parse_profile(b'{"name": "\xff\xfe"}')

    def test_parse_error_is_a_value_error(self):
        self.assertTrue(issubclass(ProfileParseError, ValueError))


class TestFinancialProfileReads(unittest.TestCase):
    def test_summary_reads_both_key_spellings(self):
        profile = {
            "MonthlyIncome": 5000,
            "MonthlyExpend": 2100,
            "LoanRequest": 20000,
            "outstandingDebt": 1500,
            "totalAssets": 90000,
            "totalLiabilities": 12000,
        }
        self.assertEqual(
            financial_summary(profile),
            {
                "MonthlyIncome": 5000,
                "MonthlyExpend": 2100,
                "LoanRequest": 20000,
                "OutstandingDebt": 1500,
                "TotalAssets": 90000,
                "TotalLiabilities": 12000,
            },
        )

    def test_missing_fields_read_as_none(self):
        summary = financial_summary({"MonthlyIncome": 5000})
        self.assertEqual(summary["MonthlyIncome"], 5000)
        self.assertIsNone(summary["TotalAssets"])
        self.assertIsNone(read_field({}, "LoanRequest"))
        self.assertIsNone(read_field(None, "LoanRequest"))

    def test_canonical_key_wins_over_alias(self):
        self.assertEqual(read_field({"TotalAssets": 1, "totalAssets": 2}, "TotalAssets"), 1)

    def test_loan_history(self):
        history = [{"status": "paid", "amount": 100}]
        self.assertEqual(get_loan_history({"loanHistory": history}), history)
        self.assertEqual(get_loan_history({"loanHistory": {"status": "paid"}}), [])
        self.assertEqual(get_loan_history({}), [])


if __name__ == "__main__":
    unittest.main()
