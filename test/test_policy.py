import io
from unittest import TestCase

from zcount.constants import INT_MAX
from zcount.policy import Thresholds, Verdict, evaluate, is_suspicious, saturating_increment, update_tally


class TestThresholds(TestCase):
    def test_defaults(self):
        thresholds = Thresholds()
        self.assertEqual(thresholds.upper, 0)
        self.assertEqual(thresholds.lower, 1)

    def test_lower_clamped_to_upper(self):
        self.assertEqual(Thresholds(upper=3, lower=10).clamped(), Thresholds(upper=3, lower=3))

    def test_no_clamp_when_unlimited(self):
        thresholds = Thresholds(upper=0, lower=10)
        self.assertEqual(thresholds.clamped(), thresholds)

    def test_no_clamp_when_lower_within_upper(self):
        thresholds = Thresholds(upper=10, lower=3)
        self.assertEqual(thresholds.clamped(), thresholds)

    def test_clamp_is_idempotent(self):
        once = Thresholds(upper=2, lower=5).clamped()
        self.assertEqual(once.clamped(), once)


class TestIsSuspicious(TestCase):
    def test_boundary(self):
        thresholds = Thresholds(lower=4)
        self.assertTrue(is_suspicious(4, thresholds))
        self.assertFalse(is_suspicious(3, thresholds))

    def test_zero_count_is_clean_by_default(self):
        self.assertFalse(is_suspicious(0, Thresholds()))

    def test_lower_zero_flags_everything(self):
        self.assertTrue(is_suspicious(0, Thresholds(lower=0)))

    def test_clamped_classification(self):
        thresholds = Thresholds(upper=5, lower=50)
        self.assertTrue(is_suspicious(5, thresholds))
        self.assertFalse(is_suspicious(4, thresholds))


class TestEvaluate(TestCase):
    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def _evaluate(self, zero_count, verbosity, is_stdin=False, thresholds=None):
        return evaluate(
            zero_count,
            thresholds or Thresholds(),
            verbosity,
            "disk.img",
            is_stdin=is_stdin,
            stdout=self.stdout,
            stderr=self.stderr,
        )

    def test_silent(self):
        verdict = self._evaluate(5, 0)
        self.assertTrue(verdict.suspicious)
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertEqual(self.stderr.getvalue(), "")

    def test_verbose_reports_suspicious_only(self):
        self._evaluate(5, 1)
        self._evaluate(0, 1)
        self.assertEqual(self.stderr.getvalue(), "disk.img: seems corrupted, 5 zero-bytes counted\n")
        self.assertEqual(self.stdout.getvalue(), "")

    def test_very_verbose_reports_clean_to_stdout(self):
        verdict = self._evaluate(0, 2)
        self.assertFalse(verdict.suspicious)
        self.assertEqual(self.stdout.getvalue(), "disk.img: 0 zero-bytes counted\n")
        self.assertEqual(self.stderr.getvalue(), "")

    def test_very_verbose_reports_suspicious_to_stderr(self):
        self._evaluate(7, 3)
        self.assertEqual(self.stderr.getvalue(), "disk.img: seems corrupted, 7 zero-bytes counted\n")
        self.assertEqual(self.stdout.getvalue(), "")

    def test_stdin_messages(self):
        self._evaluate(2, 2, is_stdin=True)
        self._evaluate(0, 2, is_stdin=True)
        self.assertEqual(self.stderr.getvalue(), "data in stdin seems corrupted, 2 zero-bytes counted\n")
        self.assertEqual(self.stdout.getvalue(), "0 zero-bytes in stdin counted\n")

    def test_stdin_verdict_keeps_label(self):
        verdict = evaluate(0, Thresholds(), 0, "stdin", is_stdin=True, stdout=self.stdout, stderr=self.stderr)
        self.assertEqual(verdict.label, "stdin")
        self.assertTrue(verdict.is_stdin)

    def test_threshold_clamped_before_classification(self):
        verdict = self._evaluate(2, 0, thresholds=Thresholds(upper=2, lower=9))
        self.assertTrue(verdict.suspicious)


class TestTally(TestCase):
    def test_suspicious_increments(self):
        verdict = Verdict(label="a", zero_count=3, suspicious=True)
        self.assertEqual(update_tally(0, verdict), 1)

    def test_clean_leaves_tally(self):
        verdict = Verdict(label="a", zero_count=0, suspicious=False)
        self.assertEqual(update_tally(4, verdict), 4)

    def test_saturates_at_int_max(self):
        verdict = Verdict(label="a", zero_count=3, suspicious=True)
        self.assertEqual(update_tally(INT_MAX, verdict), INT_MAX)

    def test_saturating_increment(self):
        self.assertEqual(saturating_increment(0, 2), 1)
        self.assertEqual(saturating_increment(2, 2), 2)
