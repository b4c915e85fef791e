"""
Helpers for OpenGL state setup and shader compilation.
"""

from __future__ import annotations
import logging
import OpenGL.GL as gl  # noqa: N811
from typing import Optional

logger = logging.getLogger(__name__)

# Flat colour shader for line segments given in normalized device coordinates
LINE_VERTEX_SHADER = """
#version 120
attribute vec3 aPos;
attribute vec3 aColor;
varying vec3 vColor;
void main() {
    gl_Position = vec4(aPos, 1.0);
    vColor = aColor;
}
"""

LINE_FRAGMENT_SHADER = """
#version 120
varying vec3 vColor;
void main() {
    gl_FragColor = vec4(vColor, 1.0);
}
"""


class ShaderProgram:
    """
    Compiled and linked vertex + fragment shader pair.
    Raises RuntimeError if either stage fails to compile or the link fails.
    """

    def __init__(
        self,
        vertex_source: Optional[str] = None,
        fragment_source: Optional[str] = None,
    ) -> None:
        if vertex_source is None or fragment_source is None:
            raise ValueError(
                "Vertex and fragment shader sources must be provided"
            )
        vs = self._compile_stage(vertex_source, gl.GL_VERTEX_SHADER, "vertex")
        try:
            fs = self._compile_stage(
                fragment_source, gl.GL_FRAGMENT_SHADER, "fragment"
            )
        except RuntimeError:
            gl.glDeleteShader(vs)
            raise
        try:
            self.id = self._link_stages(vs, fs)
        finally:
            # Linked programs keep their own copy; failed links need none
            gl.glDeleteShader(vs)
            gl.glDeleteShader(fs)

    def _compile_stage(self, source: str, shader_type: int, stage: str) -> int:
        """Compile one stage; the shader object is freed if compilation fails."""
        shader = gl.glCreateShader(shader_type)
        gl.glShaderSource(shader, source)
        gl.glCompileShader(shader)
        if gl.glGetShaderiv(shader, gl.GL_COMPILE_STATUS):
            return shader
        log = gl.glGetShaderInfoLog(shader).decode()
        gl.glDeleteShader(shader)
        logger.error("%s shader compile failed: %s", stage.capitalize(), log)
        raise RuntimeError(f"{stage.capitalize()} shader compile error: {log}")

    def _link_stages(self, vs: int, fs: int) -> int:
        """Link the line shader pair; the program is freed if linking fails."""
        prog = gl.glCreateProgram()
        gl.glAttachShader(prog, vs)
        gl.glAttachShader(prog, fs)
        gl.glLinkProgram(prog)
        if gl.glGetProgramiv(prog, gl.GL_LINK_STATUS):
            return prog
        log = gl.glGetProgramInfoLog(prog).decode()
        gl.glDeleteProgram(prog)
        logger.error("Line shader link failed: %s", log)
        raise RuntimeError(f"Shader link error: {log}")

    def use(self) -> None:
        gl.glUseProgram(self.id)

    def stop(self) -> None:
        gl.glUseProgram(0)

    def get_attrib(self, name: str) -> int:
        return gl.glGetAttribLocation(self.id, name)

    def delete(self) -> None:
        gl.glDeleteProgram(self.id)


def setup_opengl(width: int, height: int) -> None:
    """
    Configure the viewport for a 2D line view (no depth test, alpha blending).
    """
    gl.glViewport(0, 0, width, height)
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
