from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from statbar import (
    ArrayStatisticalDataset,
    BarStyle,
    GradientPaint,
    StandardGradientTransformer,
    StandardItemLabelGenerator,
    render_statistical_bar_chart,
)


def _build_dataset() -> ArrayStatisticalDataset:
    means = np.asarray(
        [
            [4.2, -1.5, 6.8, 3.1],
            [2.7, 1.9, -3.4, 5.6],
            [5.1, None, 4.4, -2.2],
        ],
        dtype=object,
    )
    std_devs = [
        [0.8, 0.6, 1.4, None],
        [1.1, 0.4, 0.9, 1.2],
        [0.5, None, 0.7, 0.6],
    ]
    return ArrayStatisticalDataset(
        means,
        std_devs,
        row_keys=["control", "dose-a", "dose-b"],
        column_keys=["week-1", "week-2", "week-3", "week-4"],
    )


def _save_rgba(path: Path, frame: np.ndarray) -> None:
    Image.fromarray(frame).save(path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a statistical bar chart to PNG.")
    parser.add_argument("--out-dir", type=Path, default=Path.cwd())
    parser.add_argument("--width", type=int, default=960)
    parser.add_argument("--height", type=int, default=540)
    parser.add_argument("--clip", type=float, nargs=2, metavar=("LOWER", "UPPER"), default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    dataset = _build_dataset()
    style = BarStyle(
        series_fills=(
            GradientPaint(color1=(96, 182, 255, 255), color2=(40, 90, 170, 255)),
            GradientPaint(color1=(255, 184, 70, 255), color2=(170, 100, 30, 255)),
            GradientPaint(color1=(140, 220, 140, 255), color2=(60, 130, 60, 255)),
        ),
        gradient_transformer=StandardGradientTransformer("horizontal"),
        draw_bar_outline=True,
        item_labels_visible=True,
    )
    args.out_dir.mkdir(parents=True, exist_ok=True)
    for orientation in ("vertical", "horizontal"):
        result = render_statistical_bar_chart(
            dataset,
            width=args.width,
            height=args.height,
            orientation=orientation,
            value_range=None if args.clip is None else tuple(args.clip),
            style=style,
            label_generator=StandardItemLabelGenerator(step=0.1),
        )
        path = args.out_dir / f"statistical_bars_{orientation}.png"
        _save_rgba(path, result.canvas)
        print(f"wrote {path} ({len(result.entities)} bars)")


if __name__ == "__main__":
    main()
