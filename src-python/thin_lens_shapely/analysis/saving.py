"""
Copyright 2026 thin-lens-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

===============================================================================
Render Model Export Utilities
===============================================================================
Exports a RenderModel to files for presentation layers that do not run
Python (a browser front end, a plotting script):

- JSON: the complete model, with an image at infinity encoded as null
- CSV: one row per principal ray segment
===============================================================================
"""

import csv
import json
from pathlib import Path
from typing import Union

from ..core.render_model import RenderModel


def save_render_model_json(
    model: RenderModel,
    output_path: Union[str, Path],
    filename: str = "render_model.json",
    indent: int = 2,
) -> Path:
    """
    Write the render model to a JSON file.

    Args:
        model: RenderModel to export.
        output_path: Directory where the file will be saved.
        filename: Name of the output file (default: "render_model.json").
        indent: JSON indentation (default: 2).

    Returns:
        Path: Full path to the created file.

    Raises:
        OSError: If the directory cannot be created or the file cannot be written.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    json_file = output_dir / filename
    # allow_nan=False: the model must never carry inf/nan into JSON
    json_file.write_text(
        json.dumps(model.to_dict(), indent=indent, ensure_ascii=False, allow_nan=False),
        encoding='utf-8',
    )
    return json_file


def save_rays_csv(
    model: RenderModel,
    output_path: Union[str, Path],
    filename: str = "rays.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export the principal ray segments to a CSV file.

    Columns: ray (parallel/chief), part (pre_lens/post_lens), endpoints,
    length and whether the segment is drawn dashed.

    Args:
        model: RenderModel to export.
        output_path: Directory where the CSV file will be saved.
        filename: Name of the output CSV file (default: "rays.csv").
        precision_coords: Decimal places for coordinate values (default: 4).

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        OSError: If the directory cannot be created or the file cannot be written.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / filename

    coord_fmt = f"{{:.{precision_coords}f}}"
    names = ('parallel', 'chief')

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['ray', 'part', 'p1_x', 'p1_y', 'p2_x', 'p2_y', 'length', 'dashed'])

        for part, segments, dashed in (
            ('pre_lens', model.rays.pre_lens, False),
            ('post_lens', model.rays.post_lens, model.rays.dashed),
        ):
            for name, seg in zip(names, segments):
                writer.writerow([
                    name,
                    part,
                    coord_fmt.format(seg.p1.x),
                    coord_fmt.format(seg.p1.y),
                    coord_fmt.format(seg.p2.x),
                    coord_fmt.format(seg.p2.y),
                    coord_fmt.format(seg.length),
                    dashed,
                ])

    return csv_file
