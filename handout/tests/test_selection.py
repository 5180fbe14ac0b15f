import unittest
from handout.domain.HandoutState import HandoutState
from handout.domain.Medication import Medication
from handout.logic.selection.matcher import find_med_by_name, update_selection, select_by_text


class TestSelection(unittest.TestCase):

    def setUp(self):
        self.amox = Medication("Amoxicillin 500 mg", "images/amoxicillin-500.png", ["Amox 500", "Amoxicillin"])
        self.ibu = Medication("Ibuprofen 200 mg", "images/ibuprofen-200.png", ["Advil 200", "Motrin 200", "Ibuprofen"])
        self.meds = [self.amox, self.ibu]

    def test_every_name_and_alias_resolves_to_its_medication(self):
        for med in self.meds:
            for text in (med.name,) + med.aliases:
                self.assertIs(find_med_by_name(self.meds, text), med)
                self.assertIs(find_med_by_name(self.meds, text.upper()), med)
                self.assertIs(find_med_by_name(self.meds, text.lower()), med)

    def test_non_matching_text_resolves_to_none(self):
        self.assertIsNone(find_med_by_name(self.meds, "Tylenol"))
        self.assertIsNone(find_med_by_name(self.meds, "Ibuprofen 200"))
        self.assertIsNone(find_med_by_name(self.meds, ""))
        self.assertIsNone(find_med_by_name(self.meds, "   "))
        self.assertIsNone(find_med_by_name(self.meds, None))

    def test_first_match_wins(self):
        dup = Medication("Amoxicillin Generic", "", ["Amoxicillin"])
        self.assertIs(find_med_by_name([self.amox, dup], "amoxicillin"), self.amox)

    def test_update_selection_returns_new_state(self):
        state = HandoutState(meds=self.meds)
        selected = update_selection(state, self.ibu)
        self.assertIs(selected.selected, self.ibu)
        self.assertIsNone(state.selected)
        cleared = update_selection(selected, None)
        self.assertFalse(cleared.has_selection)

    def test_select_by_text(self):
        state = select_by_text(HandoutState(meds=self.meds), "advil 200")
        self.assertIs(state.selected, self.ibu)
        state = select_by_text(state, "unknown")
        self.assertIsNone(state.selected)


if __name__ == '__main__':
    unittest.main()
