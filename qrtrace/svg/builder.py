"""QR SVG builder — composes background, module outlines, finder ornaments and logo.

The outline pipeline produces path data; this module only decides where
things go on the canvas and how they are painted.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any

from qrtrace.engine.config import PipelineConfig
from qrtrace.engine.context import RenderContext
from qrtrace.engine.pipeline import Pipeline, create_pipeline
from qrtrace.models.options import RenderOptions
from qrtrace.outline.grid import Mask, SymbolMatrix
from qrtrace.outline.mask import FINDER_DOT, FINDER_RING
from qrtrace.svg import primitives as p
from qrtrace.svg.serializer import serialize_svg
from qrtrace.symbol.encoder import encode
from qrtrace.utils.math_helpers import ERROR_CORRECTION_PERCENTS, ImageSize, calculate_image_size, round_size

logger = logging.getLogger(__name__)

Element = dict[str, Any]


@dataclass
class BuildResult:
    svg: str
    context: RenderContext
    width: float
    height: float
    image: ImageSize


class QRSvgBuilder:
    """Builds one SVG document for one set of render options."""

    def __init__(
        self,
        options: RenderOptions,
        symbol: SymbolMatrix | None = None,
        config: PipelineConfig | None = None,
        pipeline: Pipeline | None = None,
    ) -> None:
        self.options = options
        qr = options.qr_options
        self.symbol = symbol or encode(
            options.data,
            type_number=qr.type_number,
            error_correction_level=qr.error_correction_level,
            mode=qr.mode,
        )
        self.config = replace(config or PipelineConfig(), round_size=options.dots_options.round_size)
        self.pipeline = pipeline or create_pipeline(self.config)
        self.count = self.symbol.module_count()
        self.width, self.height = self.viewbox_size()

    @property
    def dot_size(self) -> float:
        return self.config.dot_size

    def viewbox_size(self) -> tuple[float, float]:
        """View box of the symbol plus margin, scaled for circles and stretched to the aspect ratio."""
        multiplier = math.sqrt(2) if self.options.shape == "circle" else 1.0
        aspect = self.options.width / self.options.height
        size = (self.count * self.dot_size + self.options.margin * 2) * multiplier
        return max(size * aspect, size), max(size / aspect, size)

    def symbol_origin(self) -> tuple[float, float]:
        """Canvas position of the symbol's top-left module."""
        side = self.count * self.dot_size
        return (
            round_size((self.width - side) / 2, self.config.round_size),
            round_size((self.height - side) / 2, self.config.round_size),
        )

    def image_size(self) -> ImageSize:
        if not self.options.image:
            return ImageSize()
        image_options = self.options.image_options
        ecl = self.options.qr_options.error_correction_level
        cover = image_options.image_size * ERROR_CORRECTION_PERCENTS[ecl]
        return calculate_image_size(
            original_width=image_options.image_width,
            original_height=image_options.image_height,
            max_hidden_dots=math.floor(cover * self.count * self.count),
            max_hidden_axis_dots=self.count - 14,
            dot_size=self.dot_size,
        )

    def build(self) -> BuildResult:
        image = self.image_size()
        hide = image if self.options.image_options.hide_background_dots else ImageSize()

        ctx = RenderContext(
            symbol=self.symbol,
            style=self.options.dots_options.type,
            shape=self.options.shape,
            canvas_width=self.width,
            canvas_height=self.height,
            margin=self.options.margin,
            hide_x=hide.hide_x,
            hide_y=hide.hide_y,
            config=self.config,
        )
        self.pipeline.run(ctx)

        elements: list[Element] = []
        elements.extend(self._background())
        elements.extend(self._modules(ctx, self.options.dots_options.color))
        elements.extend(self._corners())
        elements.extend(self._image(image))

        root_attrs = {} if self.config.round_size else {"shape-rendering": "crispEdges"}
        svg = serialize_svg(elements, self.width, self.height, root_attrs=root_attrs)
        logger.info(
            "Built %dx%d symbol: %d elements, %.0fx%.0f view box",
            self.count, self.count, len(elements), self.width, self.height,
        )
        return BuildResult(svg=svg, context=ctx, width=self.width, height=self.height, image=image)

    # --- Layers ---

    def _background(self) -> list[Element]:
        background = self.options.background_options
        if not background.color:
            return []
        if background.round:
            side = min(self.width, self.height)
            return [{
                "tag": "rect",
                "x": round_size((self.width - side) / 2, self.config.round_size),
                "y": round_size((self.height - side) / 2, self.config.round_size),
                "width": side,
                "height": side,
                "rx": side / 2 * background.round,
                "fill": background.color,
            }]
        return [{"tag": "rect", "width": self.width, "height": self.height, "fill": background.color}]

    def _modules(self, ctx: RenderContext, color: str) -> list[Element]:
        if not ctx.traced:
            return self._dot_circles(ctx, color)
        return [
            {"tag": "path", "fill-rule": path.fill_rule, "d": path.d, "fill": color}
            for path in ctx.paths
        ]

    def _dot_circles(self, ctx: RenderContext, color: str) -> list[Element]:
        ox, oy = ctx.mask_origin()
        radius = self.dot_size / 2
        return [
            {
                "tag": "circle",
                "cx": ox + cell.col * self.dot_size + radius,
                "cy": oy + cell.row * self.dot_size + radius,
                "r": radius,
                "fill": color,
            }
            for cell in ctx.dots
        ]

    def _trace_template(self, template: Mask, style: str, origin: tuple[float, float], color: str) -> list[Element]:
        ctx = RenderContext(mask=template, style=style, exclude_finders=False, origin=origin, config=self.config)
        self.pipeline.run(ctx)
        return self._modules(ctx, color)

    def _corners(self) -> list[Element]:
        dot = self.dot_size
        square_size = dot * self.config.finder_size
        dot_size = dot * self.config.finder_dot_size
        inset = (square_size - dot_size) / 2
        x0, y0 = self.symbol_origin()
        far = dot * (self.count - self.config.finder_size)

        dots_options = self.options.dots_options
        square_options = self.options.corners_square_options
        dot_options = self.options.corners_dot_options
        square_color = square_options.color or dots_options.color
        dot_color = dot_options.color or dots_options.color

        elements: list[Element] = []
        for col_k, row_k in ((0, 0), (1, 0), (0, 1)):
            x, y = x0 + col_k * far, y0 + row_k * far

            square_type = square_options.type
            if square_type == "square":
                elements.append(_filled(p.square_ring_path(x, y, square_size, dot), square_color, "evenodd"))
            elif square_type == "dot":
                elements.append(_filled(p.donut_path(x, y, square_size, dot), square_color, "evenodd"))
            elif square_type == "extra-rounded":
                elements.append(_filled(p.rounded_ring_path(x, y, square_size), square_color, "evenodd"))
            else:
                style = square_type or dots_options.type
                elements.extend(self._trace_template(FINDER_RING, style, (x, y), square_color))

            dot_type = dot_options.type
            if dot_type == "square":
                elements.append({
                    "tag": "rect",
                    "x": x + inset,
                    "y": y + inset,
                    "width": dot_size,
                    "height": dot_size,
                    "fill": dot_color,
                })
            elif dot_type == "dot":
                elements.append({
                    "tag": "circle",
                    "cx": x + square_size / 2,
                    "cy": y + square_size / 2,
                    "r": dot_size / 2,
                    "fill": dot_color,
                })
            else:
                style = dot_type or dots_options.type
                elements.extend(self._trace_template(FINDER_DOT, style, (x, y), dot_color))
        return elements

    def _image(self, image: ImageSize) -> list[Element]:
        if not self.options.image:
            return []
        if image.width <= 0 or image.height <= 0:
            logger.warning("Logo has no intrinsic size; not drawn")
            return []
        margin = self.options.image_options.margin
        side = self.count * self.dot_size
        x0, y0 = self.symbol_origin()
        return [{
            "tag": "image",
            "href": self.options.image,
            "xlink:href": self.options.image,
            "x": x0 + round_size(margin + (side - image.width) / 2, self.config.round_size),
            "y": y0 + round_size(margin + (side - image.height) / 2, self.config.round_size),
            "width": image.width - margin * 2,
            "height": image.height - margin * 2,
        }]


def _filled(d: str, color: str, fill_rule: str = "nonzero") -> Element:
    return {"tag": "path", "fill-rule": fill_rule, "d": d, "fill": color}


def build_svg(options: RenderOptions, config: PipelineConfig | None = None) -> BuildResult:
    return QRSvgBuilder(options, config=config).build()
