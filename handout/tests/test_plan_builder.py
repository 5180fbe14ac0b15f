import unittest
from handout.domain.HandoutState import HandoutState
from handout.domain.Medication import Medication
from handout.domain.PlanEntry import PlanEntry
from handout.domain.exceptions import PlanValidationError
from handout.logic.plan.builder import (
    add_medication_to_plan,
    clear_all,
    next_entry_id,
    remove_medication_from_plan,
)
from handout.utilities.constants import EMPTY_FIELDS_MESSAGE, NO_SELECTION_MESSAGE


def _fixed_clock(value):
    return lambda: value


class TestPlanBuilder(unittest.TestCase):

    def setUp(self):
        self.ibu = Medication("Ibuprofen 200 mg", "images/ibuprofen-200.png", ["Advil 200"])
        self.state = HandoutState(meds=[self.ibu], selected=self.ibu)

    def test_add_appends_entry_and_resets_selection(self):
        new_state = add_medication_to_plan(self.state, directions="Take 1 tablet",
                                           instructions="With food", notes="", clock=_fixed_clock(1000))
        self.assertEqual(len(new_state.treatment_plan), 1)
        entry = new_state.treatment_plan[0]
        self.assertEqual(entry.id, 1000)
        self.assertEqual(entry.name, "Ibuprofen 200 mg")
        self.assertEqual(entry.image, "images/ibuprofen-200.png")
        self.assertEqual(entry.directions, "Take 1 tablet")
        self.assertEqual(entry.instructions, "With food")
        self.assertEqual(entry.notes, "")
        self.assertIsNone(new_state.selected)
        # input state untouched
        self.assertEqual(len(self.state.treatment_plan), 0)
        self.assertIs(self.state.selected, self.ibu)

    def test_add_trims_fields(self):
        new_state = add_medication_to_plan(self.state, notes="  as needed \n")
        self.assertEqual(new_state.treatment_plan[0].notes, "as needed")

    def test_add_without_selection_raises(self):
        state = self.state.evolve(selected=None)
        with self.assertRaises(PlanValidationError) as ctx:
            add_medication_to_plan(state, directions="Take 1 tablet")
        self.assertEqual(ctx.exception.code, "no_selection")
        self.assertEqual(str(ctx.exception), NO_SELECTION_MESSAGE)
        self.assertEqual(state.treatment_plan, ())

    def test_add_with_all_fields_empty_raises(self):
        with self.assertRaises(PlanValidationError) as ctx:
            add_medication_to_plan(self.state, directions="  ", instructions="", notes=None)
        self.assertEqual(ctx.exception.code, "empty_fields")
        self.assertEqual(ctx.exception.message, EMPTY_FIELDS_MESSAGE)
        self.assertEqual(self.state.treatment_plan, ())
        self.assertIs(self.state.selected, self.ibu)

    def test_ids_stay_unique_within_the_same_millisecond(self):
        clock = _fixed_clock(5000)
        state = add_medication_to_plan(self.state, directions="a", clock=clock)
        state = add_medication_to_plan(state.evolve(selected=self.ibu), directions="b", clock=clock)
        state = add_medication_to_plan(state.evolve(selected=self.ibu), directions="c", clock=clock)
        self.assertEqual(state.entry_ids(), [5000, 5001, 5002])

    def test_next_entry_id_uses_clock_when_ahead(self):
        plan = [PlanEntry(id=10), PlanEntry(id=20)]
        self.assertEqual(next_entry_id(plan, _fixed_clock(99)), 99)
        self.assertEqual(next_entry_id(plan, _fixed_clock(15)), 21)
        self.assertEqual(next_entry_id([], _fixed_clock(7)), 7)

    def test_remove_present_id(self):
        plan = (PlanEntry(1, "A", directions="x"), PlanEntry(2, "B", directions="y"), PlanEntry(3, "C", notes="z"))
        state = self.state.evolve(treatment_plan=plan)
        new_state = remove_medication_from_plan(state, 2)
        self.assertEqual(new_state.entry_ids(), [1, 3])
        self.assertEqual(len(state.treatment_plan), 3)

    def test_remove_absent_id_is_noop(self):
        plan = (PlanEntry(1, "A", directions="x"),)
        state = self.state.evolve(treatment_plan=plan)
        new_state = remove_medication_from_plan(state, 42)
        self.assertEqual(new_state.treatment_plan, plan)

    def test_clear_all(self):
        plan = (PlanEntry(1, "A", directions="x"),)
        state = clear_all(self.state.evolve(treatment_plan=plan))
        self.assertTrue(state.is_empty)
        self.assertIsNone(state.selected)
        self.assertEqual(state.meds, (self.ibu,))


if __name__ == '__main__':
    unittest.main()
