"""Generate snapshot outputs from a session."""

import json
from pathlib import Path

from .layout import apply_ring_rotation, render_frame
from .session import Frame, RadialSession


def frame_to_dict(frame: Frame) -> dict:
    """Serialize a frame to plain data.

    Each label carries both its transform before ring rotation and its final
    on-screen placement.
    """
    labels = []
    for label in frame.labels:
        t = label.transform
        placed = apply_ring_rotation(t, frame.rotation, frame.canvas_size)
        labels.append(
            {
                "index": label.node.index,
                "caption": label.node.caption,
                "x": t.x,
                "y": t.y,
                "rotation": t.rotation,
                "scale": t.scale,
                "opacity": t.opacity,
                "width": label.width,
                "height": label.height,
                "screen": {"x": placed.x, "y": placed.y, "rotation": placed.rotation},
            }
        )

    return {
        "canvas": {"width": frame.canvas_size[0], "height": frame.canvas_size[1]},
        "view": {
            "rotation": frame.rotation,
            "radius": frame.radius,
            "alignment": frame.alignment.value,
            "ring_radius": frame.ring_radius,
        },
        "breadcrumb": [{"index": i, "caption": c} for i, c in frame.breadcrumb],
        "can_ascend": frame.can_ascend,
        "labels": labels,
    }


def generate_json(session: RadialSession, output_file: Path | None = None) -> str:
    """Write the current frame as JSON.

    Args:
        session: Session to snapshot.
        output_file: Path to write; when None the JSON is only returned.

    Returns:
        The JSON text.
    """
    text = json.dumps(frame_to_dict(session.frame()), indent=2)
    if output_file is not None:
        with open(output_file, "w") as f:
            f.write(text + "\n")
    return text


def generate_html(
    session: RadialSession,
    output_file: Path,
    title: str | None = None,
    font_size: float = 14,
) -> None:
    """Render the current frame as an HTML page using pyvis.

    Args:
        session: Session to snapshot.
        output_file: Path to write the HTML file.
        title: Optional page heading.
        font_size: Label font size in pixels.
    """
    render_frame(session.frame(), output_file, title=title, font_size=font_size)
