"""Tests for the pipeline orchestrator and the render stages end to end."""

import math

import numpy as np
import pytest

from qrtrace.engine.config import PipelineConfig
from qrtrace.engine.context import RenderContext
from qrtrace.engine.pipeline import Pipeline
from qrtrace.engine.registry import Layer, TransformRegistry, TransformSpec
from qrtrace.outline.errors import InvalidMaskError, UnknownStyleError
from qrtrace.outline.expander import circle_padding
from qrtrace.outline.mask import build_dot_mask
from qrtrace.outline.validation import coverage_report, filled_area
from qrtrace.utils.geometry import path_rings, signed_area
from tests.conftest import (
    CHECKER,
    DIAGONAL_2X2,
    DIAGONAL_HOLES,
    FULL_3X3,
    L_TROMINO,
    RING_5X5,
    RING_WITH_ISLAND,
    SPIRAL,
    TRACED_STYLES,
    TWO_HOLES,
    U_SHAPE,
)


def outline(pipeline, mask, style="square", dot_size=10.0) -> RenderContext:
    ctx = RenderContext(
        mask=mask,
        style=style,
        exclude_finders=False,
        origin=(0.0, 0.0),
        config=PipelineConfig(dot_size=dot_size),
    )
    return pipeline.run(ctx)


# --- Orchestration ---


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: RenderContext) -> None:
        results.append("t1")

    def t2(ctx: RenderContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.MASKING, fn=t1))
    reg.register(TransformSpec(id="T0.03", layer=Layer.MASKING, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = RenderContext()
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.03" in ctx.completed_transforms


def test_pipeline_errors_are_fatal():
    reg = TransformRegistry()
    results = []

    def fail(ctx: RenderContext) -> None:
        raise ValueError("test error")

    def after(ctx: RenderContext) -> None:
        results.append("after")

    reg.register(TransformSpec(id="T0.01", layer=Layer.MASKING, fn=fail))
    reg.register(TransformSpec(id="T0.03", layer=Layer.MASKING, fn=after, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = RenderContext()
    with pytest.raises(ValueError, match="test error"):
        pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]
    assert results == []
    assert not ctx.completed_transforms


def test_run_layer_only_runs_that_layer():
    reg = TransformRegistry()
    results = []
    reg.register(TransformSpec(id="T0.01", layer=Layer.MASKING, fn=lambda ctx: results.append("mask")))
    reg.register(TransformSpec(id="T1.01", layer=Layer.LABELING, fn=lambda ctx: results.append("label")))

    ctx = Pipeline(registry=reg).run_layer(RenderContext(), Layer.LABELING)
    assert results == ["label"]
    assert ctx.completed_transforms == {"T1.01"}


def test_square_shape_skips_circle_expansion(pipeline):
    ctx = outline(pipeline, FULL_3X3)
    assert "T0.02" not in ctx.completed_transforms
    assert "T2.04" not in ctx.completed_transforms
    assert {"T0.01", "T0.03", "T1.01", "T1.02", "T2.01", "T2.02", "T2.03"} <= ctx.completed_transforms


def test_dots_style_skips_tracing(pipeline):
    ctx = outline(pipeline, RING_5X5, style="dots")
    assert ctx.completed_transforms == {"T0.01", "T0.03", "T2.04"}
    assert ctx.paths == []
    assert ctx.foreground is None
    assert len(ctx.dots) == 24
    assert ctx.dots[0] == (0, 0)


def test_unknown_style_is_rejected(pipeline):
    ctx = RenderContext(mask=FULL_3X3, style="wavy", origin=(0.0, 0.0))
    with pytest.raises(UnknownStyleError):
        pipeline.run(ctx)
    assert "T0.01" in ctx.errors


def test_context_without_input_is_rejected(pipeline):
    with pytest.raises(InvalidMaskError):
        pipeline.run(RenderContext())


def test_ragged_mask_is_rejected(pipeline):
    with pytest.raises(InvalidMaskError):
        outline(pipeline, [[True, False], [True]])


def test_empty_mask_gives_no_paths(pipeline):
    ctx = outline(pipeline, np.zeros((4, 4), dtype=bool))
    assert ctx.paths == []
    assert ctx.contours == {}


def test_repeated_runs_give_identical_output(pipeline):
    first = outline(pipeline, SPIRAL, style="rounded")
    second = outline(pipeline, SPIRAL, style="rounded")
    assert [p.d for p in first.paths] == [p.d for p in second.paths]


# --- Outlining scenarios ---


def test_full_block_square_outline(pipeline):
    ctx = outline(pipeline, FULL_3X3)
    assert len(ctx.paths) == 1
    path = ctx.paths[0]
    assert path.d == (
        "M 0 0 m 10 0 h -10 v 10 v 10 v 10 h 10 h 10 h 10 v -10 v -10 v -10 h -10 h -10"
    )
    assert path.fill_rule == "nonzero"
    assert path.cell_count == 9
    assert len(ctx.contours[path.component_id][0].steps) == 8


def test_full_block_rounded_outline(pipeline):
    ctx = outline(pipeline, FULL_3X3, style="rounded")
    d = ctx.paths[0].d
    assert d.startswith("M 0 0 m 10 0 h -5 a 5 5 0 0 0 -5 5 v 5 v 10 ")
    assert "v 5 a 5 5 0 0 0 5 5 h 5" in d
    assert "h 5 a 5 5 0 0 0 5 -5 v -5" in d
    assert "v -5 a 5 5 0 0 0 -5 -5 h -5" in d
    assert d.count(" a ") == 4
    assert filled_area(d) == pytest.approx(800 + 25 * math.pi, rel=1e-3)


def test_ring_hole_is_cut_out(pipeline):
    ctx = outline(pipeline, RING_5X5)
    assert len(ctx.paths) == 1
    path = ctx.paths[0]
    assert ctx.hole_owners == {2: [2]}
    assert path.hole_count == 1
    assert path.fill_rule == "evenodd"
    assert path.d.endswith("M 10 10 m 10 10 h 10 v 10 h -10 v -10")
    assert filled_area(path.d) == pytest.approx(2400)


def test_ring_contours_wind_opposite(pipeline):
    ctx = outline(pipeline, RING_5X5)
    outer, hole = path_rings(ctx.paths[0].d)
    assert signed_area(outer) < 0
    assert signed_area(hole) > 0


def test_diagonal_cells_are_separate_dots(pipeline):
    ctx = outline(pipeline, DIAGONAL_2X2)
    assert [p.component_id for p in ctx.paths] == [2, 3]
    assert ctx.paths[0].d == "M 0 0 v 10 h 10 v -10 h -10"
    assert ctx.paths[1].d == "M 10 10 v 10 h 10 v -10 h -10"


def test_checkerboard_is_all_single_dots(pipeline):
    ctx = outline(pipeline, CHECKER, style="rounded")
    assert len(ctx.paths) == 13
    assert all(path.cell_count == 1 for path in ctx.paths)
    assert all(contours[0].is_single for contours in ctx.contours.values())


def test_u_shape_is_one_component(pipeline):
    ctx = outline(pipeline, U_SHAPE)
    assert len(ctx.paths) == 1
    assert ctx.foreground.starts == {2: (0, 0)}
    assert filled_area(ctx.paths[0].d) == pytest.approx(500)


def test_classy_rounds_only_convex_top_left_and_bottom_right(pipeline):
    ctx = outline(pipeline, L_TROMINO, style="classy")
    d = ctx.paths[0].d
    # top-left of the upright and bottom-right of the foot; the inner corner stays sharp
    assert d.count(" a ") == 2
    assert filled_area(d) == pytest.approx(250 + 12.5 * math.pi, rel=1e-3)


def test_island_in_hole_is_its_own_component(pipeline):
    ctx = outline(pipeline, RING_WITH_ISLAND)
    assert len(ctx.paths) == 2
    ring, island = ctx.paths
    assert ring.hole_count == 1
    assert island.hole_count == 0
    assert island.cell_count == 1
    assert filled_area(ring.d) == pytest.approx(2400)


def test_two_holes_in_one_component(pipeline):
    ctx = outline(pipeline, TWO_HOLES)
    assert len(ctx.paths) == 1
    assert ctx.paths[0].hole_count == 2
    assert filled_area(ctx.paths[0].d) == pytest.approx(2600)


def test_diagonally_touching_holes_form_one_hole(pipeline):
    ctx = outline(pipeline, DIAGONAL_HOLES)
    assert ctx.paths[0].hole_count == 1
    assert filled_area(ctx.paths[0].d) == pytest.approx(1400)


@pytest.mark.parametrize("style", TRACED_STYLES)
@pytest.mark.parametrize(
    "mask",
    [FULL_3X3, RING_5X5, DIAGONAL_2X2, L_TROMINO, U_SHAPE, RING_WITH_ISLAND, DIAGONAL_HOLES, SPIRAL],
    ids=["full", "ring", "diagonal", "tromino", "u", "island", "diagonal-holes", "spiral"],
)
def test_outlines_cover_exactly_the_mask(pipeline, mask, style):
    ctx = outline(pipeline, mask, style=style)
    report = coverage_report(mask, [p.d for p in ctx.paths], 10.0)
    assert report.ok
    assert report.covered == int(mask.sum())


def test_every_contour_closes(pipeline):
    ctx = outline(pipeline, SPIRAL)
    for contours in ctx.contours.values():
        for contour in contours:
            assert contour.displacement() == (0, 0)


# --- Symbols ---


@pytest.mark.parametrize("style", TRACED_STYLES)
def test_symbol_outline_covers_dot_mask(pipeline, qr_symbol, style):
    count = qr_symbol.module_count()
    side = count * 4.0
    ctx = RenderContext(symbol=qr_symbol, style=style, canvas_width=side, canvas_height=side)
    pipeline.run(ctx)

    expected = build_dot_mask(qr_symbol)
    assert np.array_equal(ctx.mask, expected)
    assert ctx.origin == (0.0, 0.0)
    report = coverage_report(expected, [p.d for p in ctx.paths], 4.0, ctx.origin)
    assert report.ok


def test_logo_area_is_cleared(pipeline, qr_symbol):
    ctx = RenderContext(symbol=qr_symbol, hide_x=5, hide_y=3, canvas_width=84, canvas_height=84)
    pipeline.run(ctx)
    assert not ctx.mask[9:12, 8:13].any()


def test_circle_shape_expands_mask(pipeline, qr_symbol):
    count = qr_symbol.module_count()
    side = count * 4.0 * math.sqrt(2)
    ctx = RenderContext(symbol=qr_symbol, style="rounded", shape="circle", canvas_width=side, canvas_height=side)
    pipeline.run(ctx)

    padding = circle_padding(side, 0, 4.0, count)
    assert padding > 0
    assert ctx.padding == padding
    assert "T0.02" in ctx.completed_transforms
    assert ctx.mask.shape == (count + 2 * padding, count + 2 * padding)
    assert np.array_equal(ctx.mask[padding:padding + count, padding:padding + count], build_dot_mask(qr_symbol))

    report = coverage_report(ctx.mask, [p.d for p in ctx.paths], 4.0, ctx.origin)
    assert report.ok


def test_placement_centres_the_mask(pipeline, qr_symbol):
    ctx = RenderContext(symbol=qr_symbol, canvas_width=100, canvas_height=100)
    pipeline.run(ctx)
    assert ctx.origin == (8.0, 8.0)


def test_placement_without_rounding_keeps_fractions(pipeline, qr_symbol):
    ctx = RenderContext(
        symbol=qr_symbol,
        canvas_width=101,
        canvas_height=101,
        config=PipelineConfig(round_size=False),
    )
    pipeline.run(ctx)
    assert ctx.origin == (8.5, 8.5)
