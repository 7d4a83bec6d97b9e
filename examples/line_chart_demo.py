from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from linechart import LineChart, config_from_mapping


LOGGER = logging.getLogger("line_chart_demo")


class PrintingDelegate:
    def did_select_data_point(self, x: float, y_values: list[float]) -> None:
        LOGGER.info("selected x=%s y=%s", x, y_values)


def main() -> int:
    parser = argparse.ArgumentParser(description="Render a demo line chart to PNG.")
    parser.add_argument("--out", type=Path, default=Path("line_chart_demo.png"))
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=360)
    parser.add_argument("--touch-x", type=float, default=None, help="simulate a touch at this x position")
    parser.add_argument("--progress", type=float, default=1.0, help="animation progress in [0, 1]")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = config_from_mapping(
        {
            "background": "#ffffffff",
            "x": {"labels": {"values": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul"]}},
            "y": {"axis": {"inset": 20}},
        }
    )
    chart = LineChart(width=args.width, height=args.height, config=config, delegate=PrintingDelegate())
    chart.add_line([3.0, 4.0, 9.0, 11.0, 13.0, 15.0, 12.0])
    chart.add_line(np.asarray([1.0, 3.0, 5.0, 13.0, 17.0, 20.0, 18.0]))

    if args.touch_x is not None:
        chart.handle_event("touch", {"phase": "ended", "x": args.touch_x, "y": 0.0})

    frame = chart.render(progress=args.progress)
    Image.fromarray(frame).save(args.out)
    LOGGER.info("wrote %s (%dx%d)", args.out, args.width, args.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
