"""Pyvis rendering of a radial frame snapshot."""

import base64
import html
from pathlib import Path

from .coords import canvas_center
from .radial import apply_ring_rotation

LABEL_COLOR = "rgba(0,0,255,0.2)"
HOVER_COLOR = "rgba(0,128,0,0.2)"
RING_COLOR = "#0000ff"


def _svg_data_url(svg: str) -> str:
    encoded = base64.b64encode(svg.encode()).decode()
    return f"data:image/svg+xml;base64,{encoded}"


def _create_rotated_label_svg(
    label: str,
    angle: float,
    color: str,
    box_width: float,
    box_height: float,
    font_size: float = 14,
    scale: float = 1.0,
    opacity: float = 1.0,
) -> tuple[str, float]:
    """Create SVG with a label box rotated by angle.

    Args:
        label: Text to display.
        angle: Rotation in degrees (positive is clockwise on screen).
        color: Background color for the label box.
        box_width: Measured label width in pixels before scaling.
        box_height: Measured label height in pixels before scaling.
        font_size: Font size in pixels before scaling.
        scale: Scale applied to the whole label.
        opacity: Label opacity in [0, 1].

    Returns:
        Tuple of (data URL, SVG side length in pixels).
    """
    text = html.escape(label.strip())

    # Use the diagonal so the box fits at any angle
    svg_size = ((box_width * scale) ** 2 + (box_height * scale) ** 2) ** 0.5 + 4
    center = svg_size / 2

    svg = f'''<svg xmlns="http://www.w3.org/2000/svg" width="{svg_size}" height="{svg_size}">
  <g transform="translate({center}, {center}) rotate({angle}) scale({scale})" opacity="{opacity}">
    <rect x="{-box_width / 2}" y="{-box_height / 2}"
          width="{box_width}" height="{box_height}"
          fill="{color}" rx="5"/>
    <text x="0" y="{font_size * 0.35}"
          text-anchor="middle" font-family="sans-serif" font-size="{font_size}"
          fill="#000">{text}</text>
  </g>
</svg>'''

    return _svg_data_url(svg), svg_size


def _create_ring_svg(ring_radius: float, line_width: float = 3) -> tuple[str, float]:
    """Create SVG of the guide circle.

    Returns:
        Tuple of (data URL, SVG side length in pixels).
    """
    svg_size = ring_radius * 2 + line_width * 2
    center = svg_size / 2
    svg = f'''<svg xmlns="http://www.w3.org/2000/svg" width="{svg_size}" height="{svg_size}">
  <circle cx="{center}" cy="{center}" r="{ring_radius}"
          fill="none" stroke="{RING_COLOR}" stroke-width="{line_width}"/>
</svg>'''
    return _svg_data_url(svg), svg_size


def render_frame(
    frame,
    output_path: Path,
    title: str | None = None,
    font_size: float = 14,
) -> None:
    """Render a frame with pyvis.

    Positions are fixed and physics is disabled; the canvas center maps to
    the network origin.

    Args:
        frame: session.Frame to draw.
        output_path: Path to write the HTML file.
        title: Optional page heading.
        font_size: Label font size in pixels.
    """
    from pyvis.network import Network

    width, height = frame.canvas_size
    cx, cy = canvas_center(frame.canvas_size)

    net = Network(
        height=f"{max(int(height), 1)}px",
        width=f"{max(int(width), 1)}px",
        bgcolor="#ffffff",
        heading=title or "",
        cdn_resources="remote",
    )
    net.toggle_physics(False)

    # Guide ring and center indicator
    if frame.ring_radius > 0:
        ring_url, ring_size = _create_ring_svg(frame.ring_radius)
        net.add_node(
            "__ring__",
            label=" ",
            x=0,
            y=0,
            fixed=True,
            shape="image",
            image=ring_url,
            size=ring_size / 2,
            font={"size": 0},
        )
    net.add_node(
        "__center__",
        label=" ",
        x=0,
        y=0,
        fixed=True,
        shape="dot",
        size=10,
        color="rgba(0,0,255,0.2)",
        font={"size": 0},
    )

    for label in frame.labels:
        if label.transform.opacity <= 0:
            continue
        placed = apply_ring_rotation(label.transform, frame.rotation, frame.canvas_size)
        color = HOVER_COLOR if label.hovered else LABEL_COLOR
        image_url, svg_size = _create_rotated_label_svg(
            label.node.caption,
            placed.rotation,
            color,
            label.width,
            label.height,
            font_size=font_size,
            scale=placed.scale,
            opacity=placed.opacity,
        )
        net.add_node(
            label.node.index,
            label=" ",  # Space to suppress default label
            title=label.node.caption,
            x=placed.x - cx,
            y=placed.y - cy,
            fixed=True,
            shape="image",
            image=image_url,
            size=svg_size / 2,
            font={"size": 0},
        )

    net.set_options("""
    {
        "physics": {"enabled": false},
        "interaction": {
            "zoomView": false,
            "dragView": false,
            "dragNodes": false,
            "hover": true,
            "tooltipDelay": 100
        }
    }
    """)

    net.save_graph(str(output_path))
    _inject_breadcrumb_bar(output_path, frame.breadcrumb, frame.can_ascend)


def _inject_breadcrumb_bar(
    output_file: Path,
    breadcrumb: list[tuple[int, str]],
    can_ascend: bool,
) -> None:
    """Inject the breadcrumb trail and Back indicator into the page.

    Args:
        output_file: Path to the HTML file to modify.
        breadcrumb: (index, caption) pairs from the top level down.
        can_ascend: Whether a Back button applies.
    """
    with open(output_file, "r") as f:
        page = f.read()

    crumbs = "".join(
        f'<span class="crumb" data-index="{index}">{html.escape(caption.strip())}</span>'
        '<span class="sep">&gt;</span>'
        for index, caption in breadcrumb
    )
    back = '<div id="backButton">Back</div>' if can_ascend else ""

    panel = f"""
    <style>
    #breadcrumbBar {{ position:fixed;top:10px;left:10px;padding:8px 12px;background:white;
        border:1px solid #ccc;border-radius:5px;font-family:sans-serif;font-size:13px;z-index:1000; }}
    #breadcrumbBar .sep {{ margin:0 6px;color:#888; }}
    #backButton {{ position:fixed;bottom:10px;left:10px;padding:6px 12px;background:white;
        border:1px solid #ccc;border-radius:5px;font-family:sans-serif;font-size:13px;z-index:1000; }}
    </style>
    <div id="breadcrumbBar">{crumbs}</div>
    {back}
    """

    # Insert before closing body tag
    page = page.replace("</body>", panel + "</body>")

    with open(output_file, "w") as f:
        f.write(page)
