# standard libraries
import logging
import unittest

# third party libraries
# None

# local libraries
from nion.utils import Geometry
from poly.ui import Hierarchy
from poly.ui import Painter


class TestPainterClass(unittest.TestCase):

    def test_sub_painter_translates_commands_into_root_coordinates(self) -> None:
        painter = Painter.Painter(Geometry.IntSize(width=100, height=80))
        sub_painter = painter.sub_painter(Hierarchy.Transform.make(10, 20, 30, 40))
        self.assertEqual(sub_painter.size, Geometry.IntSize(width=30, height=40))
        self.assertEqual(sub_painter.origin, Geometry.IntPoint(x=10, y=20))
        nested_painter = sub_painter.sub_painter(Hierarchy.Transform.make(1, 2, 3, 4))
        nested_painter.draw_point(Geometry.IntPoint(x=1, y=1))
        sub_painter.draw_line(Painter.Line(Geometry.IntPoint(x=0, y=0), Geometry.IntPoint(x=5, y=6)))
        sub_painter.fill_rect(Geometry.IntRect(origin=Geometry.IntPoint(x=0, y=0), size=Geometry.IntSize(width=30, height=40)))
        self.assertEqual(painter.commands, [("point", 12, 23), ("line", 10, 20, 15, 26), ("fillRect", 10, 20, 30, 40)])

    def test_draw_color_records_only_changes(self) -> None:
        painter = Painter.Painter(Geometry.IntSize(width=10, height=10))
        painter.draw_color = "#F00"
        painter.draw_color = "#F00"
        painter.draw_rects([Geometry.IntRect(origin=Geometry.IntPoint(x=1, y=2), size=Geometry.IntSize(width=3, height=4))])
        painter.clear()
        painter.present()
        self.assertEqual(painter.draw_color, "#F00")
        self.assertEqual(painter.commands, [("drawColor", "#F00"), ("rect", 1, 2, 3, 4), ("clear", ), ("present", )])

    def test_sub_painter_inherits_draw_color(self) -> None:
        painter = Painter.Painter(Geometry.IntSize(width=10, height=10))
        painter.draw_color = "#0F0"
        sub_painter = painter.sub_painter(Hierarchy.Transform())
        self.assertEqual(sub_painter.draw_color, "#0F0")


if __name__ == '__main__':
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()
