"""
OpenGL drawing surface: draws a frame's LineBatch in a single GL_LINES call.
"""

from __future__ import annotations
import ctypes
import logging

try:
    import OpenGL.GL as gl  # noqa: N811
except ImportError:
    raise ImportError(
        "PyOpenGL is required to run this renderer. "
        "Please install via: pip install PyOpenGL PyOpenGL_accelerate"
    )
from .config import BACKGROUND_COLOR
from .gl_utils import (
    LINE_FRAGMENT_SHADER,
    LINE_VERTEX_SHADER,
    ShaderProgram,
    setup_opengl,
)
from .lines import LineBatch

logger = logging.getLogger(__name__)


class Renderer:
    """Draws LineBatch contents with a flat colour shader."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.w = screen_width
        self.h = screen_height
        setup_opengl(self.w, self.h)
        self.shader = ShaderProgram(
            vertex_source=LINE_VERTEX_SHADER,
            fragment_source=LINE_FRAGMENT_SHADER,
        )
        self.pos_attr = self.shader.get_attrib("aPos")
        self.color_attr = self.shader.get_attrib("aColor")
        # One dynamic buffer, refilled with the whole batch every frame
        self.vbo = gl.glGenBuffers(1)

    def resize(self, screen_width: int, screen_height: int) -> None:
        """Follow a change of window size."""
        if (screen_width, screen_height) == (self.w, self.h):
            return
        logger.debug(
            "Viewport resized from %dx%d to %dx%d",
            self.w,
            self.h,
            screen_width,
            screen_height,
        )
        self.w = screen_width
        self.h = screen_height
        gl.glViewport(0, 0, self.w, self.h)

    def draw(self, batch: LineBatch) -> None:
        """Clear the frame and draw every queued segment."""
        gl.glClearColor(*BACKGROUND_COLOR, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        verts = batch.to_vertices(self.w, self.h)
        if len(verts) == 0:
            return
        self.shader.use()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        try:
            gl.glBufferData(
                gl.GL_ARRAY_BUFFER, verts.nbytes, verts, gl.GL_DYNAMIC_DRAW
            )
            stride = verts.strides[0]
            gl.glEnableVertexAttribArray(self.pos_attr)
            gl.glVertexAttribPointer(
                self.pos_attr,
                3,
                gl.GL_FLOAT,
                gl.GL_FALSE,
                stride,
                ctypes.c_void_p(0),
            )
            # Colour follows the three position floats
            gl.glEnableVertexAttribArray(self.color_attr)
            gl.glVertexAttribPointer(
                self.color_attr,
                3,
                gl.GL_FLOAT,
                gl.GL_FALSE,
                stride,
                ctypes.c_void_p(3 * verts.itemsize),
            )
            gl.glDrawArrays(gl.GL_LINES, 0, len(verts))
            gl.glDisableVertexAttribArray(self.pos_attr)
            gl.glDisableVertexAttribArray(self.color_attr)
        finally:
            gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
            self.shader.stop()

    def shutdown(self) -> None:
        """Free GL objects; call before closing the window."""
        if self.vbo is not None:
            gl.glDeleteBuffers(1, [self.vbo])
            self.vbo = None
        self.shader.delete()
