# standard libraries
import logging
import unittest
import uuid

# third party libraries
# None

# local libraries
from poly.ui import Hierarchy
from poly.ui import Layout
from poly.ui import LinearLayout
from poly.ui import TestUI


class TestLinearLayoutClass(unittest.TestCase):

    def setUp(self) -> None:
        pass

    def tearDown(self) -> None:
        pass

    def test_left_to_right_splits_width_evenly(self) -> None:
        layout = LinearLayout.LinearLayout()
        child1 = TestUI.TestWidget()
        child2 = TestUI.TestWidget()
        layout.add_child(child1)
        layout.add_child(child2)
        layout.paint(TestUI.make_painter(100, 40))
        self.assertEqual(layout.get_child_transform(child1.id), Hierarchy.Transform.make(0, 0, 50, 40))
        self.assertEqual(layout.get_child_transform(child2.id), Hierarchy.Transform.make(50, 0, 50, 40))

    def test_right_to_left_mirrors_origins(self) -> None:
        layout = LinearLayout.LinearLayout(LinearLayout.LinearLayoutDirection.RightToLeft)
        child1 = TestUI.TestWidget()
        child2 = TestUI.TestWidget()
        layout.add_child(child1, 1)
        layout.add_child(child2, 3)
        layout.paint(TestUI.make_painter(100, 40))
        self.assertEqual(layout.get_child_transform(child1.id), Hierarchy.Transform.make(75, 0, 25, 40))
        self.assertEqual(layout.get_child_transform(child2.id), Hierarchy.Transform.make(0, 0, 75, 40))

    def test_top_to_bottom_honors_minimum(self) -> None:
        layout = LinearLayout.LinearLayout(LinearLayout.LinearLayoutDirection.TopToBottom)
        child1 = TestUI.TestWidget()
        child2 = TestUI.TestWidget()
        layout.add_child(child1, min_size=70)
        layout.add_child(child2)
        layout.paint(TestUI.make_painter(30, 100))
        self.assertEqual(layout.get_child_transform(child1.id), Hierarchy.Transform.make(0, 0, 30, 70))
        self.assertEqual(layout.get_child_transform(child2.id), Hierarchy.Transform.make(0, 70, 30, 30))

    def test_bottom_to_top_honors_maximum(self) -> None:
        layout = LinearLayout.LinearLayout(LinearLayout.LinearLayoutDirection.BottomToTop)
        child1 = TestUI.TestWidget()
        child2 = TestUI.TestWidget()
        layout.add_child(child1, max_size=20)
        layout.add_child(child2)
        layout.paint(TestUI.make_painter(30, 100))
        self.assertEqual(layout.get_child_transform(child1.id), Hierarchy.Transform.make(0, 80, 30, 20))
        self.assertEqual(layout.get_child_transform(child2.id), Hierarchy.Transform.make(0, 0, 30, 80))

    def test_changing_direction_relayouts(self) -> None:
        layout = LinearLayout.LinearLayout()
        child = TestUI.TestWidget()
        layout.add_child(child)
        painter = TestUI.make_painter(60, 40)
        layout.paint(painter)
        layout.direction = LinearLayout.LinearLayoutDirection.TopToBottom
        layout.paint(painter)
        self.assertEqual(layout.get_child_transform(child.id), Hierarchy.Transform.make(0, 0, 60, 40))

    def test_set_stretch_changes_split(self) -> None:
        layout = LinearLayout.LinearLayout()
        child1 = TestUI.TestWidget()
        child2 = TestUI.TestWidget()
        layout.add_child(child1)
        layout.add_child(child2)
        painter = TestUI.make_painter(90, 10)
        layout.paint(painter)
        layout.set_stretch(1, 2)
        layout.paint(painter)
        self.assertEqual(layout.get_child_transform(child2.id), Hierarchy.Transform.make(30, 0, 60, 10))
        with self.assertRaises(Layout.OutOfRangeError):
            layout.set_max_size(2, 5)

    def test_remove_child_removes_its_item(self) -> None:
        layout = LinearLayout.LinearLayout()
        child1 = TestUI.TestWidget()
        child2 = TestUI.TestWidget()
        layout.add_child(child1, max_size=10)
        layout.add_child(child2)
        self.assertIs(layout.remove_child(child2.id), child2)
        self.assertEqual(len(layout.layout), 1)
        layout.set_max_size(0, 100)
        layout.paint(TestUI.make_painter(100, 10))
        self.assertEqual(layout.get_child_transform(child1.id), Hierarchy.Transform.make(0, 0, 100, 10))
        with self.assertRaises(Layout.OutOfRangeError):
            layout.remove_child(uuid.uuid4())

    def test_adding_same_child_twice_raises(self) -> None:
        layout = LinearLayout.LinearLayout()
        child = TestUI.TestWidget()
        layout.add_child(child)
        with self.assertRaises(Layout.DuplicateAssignmentError):
            layout.add_child(child)
        self.assertEqual(len(layout.layout), 1)

    def test_child_added_without_item_fails_layout(self) -> None:
        layout = LinearLayout.LinearLayout()
        layout.add_child(TestUI.TestWidget())
        layout.hierarchy.add(TestUI.TestWidget())
        with self.assertRaises(AssertionError):
            layout.paint(TestUI.make_painter(100, 10))


if __name__ == '__main__':
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()
