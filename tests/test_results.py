import unittest

from pingmon.checks.results import CheckOutcome, format_latency


class CheckOutcomeTests(unittest.TestCase):
    def test_success_has_latency_only(self) -> None:
        outcome = CheckOutcome.succeeded(123.456)

        self.assertEqual(outcome.status, "success")
        self.assertEqual(outcome.loss, "0%")
        self.assertEqual(outcome.latency, "123.46 ms")
        self.assertIsNone(outcome.error)
        self.assertEqual(
            outcome.to_dict(),
            {"status": "success", "loss": "0%", "avg_time": "123.46 ms"},
        )

    def test_failure_has_error_only(self) -> None:
        outcome = CheckOutcome.failed("Request failed: boom")

        self.assertFalse(outcome.ok)
        self.assertEqual(
            outcome.to_dict(),
            {"status": "failed", "loss": "100%", "error": "Request failed: boom"},
        )

    def test_inconsistent_outcomes_rejected(self) -> None:
        cases = [
            dict(status="success", loss="0%"),
            dict(status="success", loss="0%", latency="1.00 ms", error="x"),
            dict(status="failed", loss="100%"),
            dict(status="failed", loss="100%", latency="1.00 ms", error="x"),
            dict(status="unknown", loss="0%", latency="1.00 ms"),
        ]
        for kwargs in cases:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    CheckOutcome(**kwargs)

    def test_format_latency_two_decimals(self) -> None:
        self.assertEqual(format_latency(0), "0.00 ms")
        self.assertEqual(format_latency(5.0), "5.00 ms")


if __name__ == "__main__":
    unittest.main()
