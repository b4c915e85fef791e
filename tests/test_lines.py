import numpy as np
import pytest

from gridcast.lines import LineBatch, Segment
from gridcast.projector import WallSlice


def test_empty_batch_packs_to_empty_array():
    verts = LineBatch().to_vertices(800, 600)
    assert verts.shape == (0, 6)
    assert verts.dtype == np.float32


def test_vertices_are_in_normalized_device_coordinates():
    batch = LineBatch([Segment((0.0, -50.0), (100.0, 50.0), (0.5, 0.25, 1.0))])
    verts = batch.to_vertices(200, 200)
    assert verts.shape == (2, 6)
    np.testing.assert_allclose(verts[0], [0.0, -0.5, 0.0, 0.5, 0.25, 1.0])
    np.testing.assert_allclose(verts[1], [1.0, 0.5, 0.0, 0.5, 0.25, 1.0])


def test_add_slice_queues_vertical_segment():
    batch = LineBatch()
    batch.add_slice(WallSlice(3, -1.0, 40.0, 2.5, 2.5, 1.0))
    assert len(batch) == 1
    seg = next(iter(batch))
    assert seg.start == (-1.0, -40.0)
    assert seg.end == (-1.0, 40.0)
    assert seg.color == (1.0, 1.0, 1.0)


def test_extend_and_add():
    batch = LineBatch()
    batch.add((0, 0), (1, 1), (1, 0, 0))
    batch.extend([Segment((1, 1), (2, 2), (0, 1, 0))] * 2)
    assert len(batch) == 3
    assert batch.to_vertices(4, 4).shape == (6, 6)
    assert batch.to_vertices(4, 4)[5, 1] == pytest.approx(1.0)
