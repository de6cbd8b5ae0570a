import unittest
from hl7_derivation.core.data_models import EncounterStatus
from hl7_derivation.utils.encounter import get_encounter_status


class TestEncounterStatus(unittest.TestCase):
    """Test encounter status precedence."""

    def test_finished_first(self):
        self.assertEqual(get_encounter_status("20240101", "20231231", "X"), "finished")

    def test_arrived(self):
        self.assertEqual(get_encounter_status(None, "20231231", "X"), "arrived")

    def test_cancelled(self):
        self.assertEqual(get_encounter_status(None, None, "X"), "cancelled")

    def test_unknown(self):
        self.assertEqual(get_encounter_status(None, None, None), "unknown")

    def test_presence_is_not_value_inspected(self):
        """An empty value still counts as present."""
        self.assertEqual(get_encounter_status("", None, None), "finished")
        self.assertEqual(get_encounter_status(None, " ", None), "arrived")

    def test_codes(self):
        self.assertEqual(EncounterStatus.IN_PROGRESS.to_code(), "in-progress")
        self.assertEqual(EncounterStatus.ENTERED_IN_ERROR.to_code(), "entered-in-error")
        self.assertEqual(EncounterStatus("unknown"), EncounterStatus.UNKNOWN)


if __name__ == '__main__':
    unittest.main()
