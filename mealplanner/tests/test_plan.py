import unittest

from mealplanner.domain.Plan import Plan, PlanEntry


class TestPlan(unittest.TestCase):

    def test_entries_follow_weekday_order(self):
        plan = Plan()
        for day in ("Tuesday", "Monday"):
            plan.assign(day, "dinner", "Pasta")
            plan.assign(day, "breakfast", "Eggs")
            plan.assign(day, "lunch", "Soup")
        self.assertEqual(list(plan.entries()), [
            PlanEntry("Monday", "Eggs", "Soup", "Pasta"),
            PlanEntry("Tuesday", "Eggs", "Soup", "Pasta"),
        ])

    def test_incomplete_day_is_not_an_entry(self):
        plan = Plan()
        plan.assign("Monday", "breakfast", "Eggs")
        self.assertFalse(plan.is_day_complete("Monday"))
        self.assertEqual(list(plan.entries()), [])
        self.assertEqual(len(plan), 1)

    def test_assign_rejects_unknown_day_or_category(self):
        plan = Plan()
        with self.assertRaises(ValueError):
            plan.assign("Someday", "lunch", "Soup")
        with self.assertRaises(ValueError):
            plan.assign("Monday", "brunch", "Soup")


if __name__ == '__main__':
    unittest.main()
