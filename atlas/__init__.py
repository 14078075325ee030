"""
Atlas — deterministic design-token generator.

    from atlas import build_design_system, write_output_files

    ds = build_design_system("cyberpunk", "hackathon")
    write_output_files(ds, "design-system", ["css", "json"])
"""

__version__ = "1.0.0"

from .design_system import DesignSystem, build_design_system, generate_design_system  # noqa: E402
from .themes import get_theme, list_themes, load_custom_theme, recommend_themes  # noqa: E402
from .writers import write_output_files  # noqa: E402

__all__ = [
    "DesignSystem",
    "build_design_system",
    "generate_design_system",
    "get_theme",
    "list_themes",
    "load_custom_theme",
    "recommend_themes",
    "write_output_files",
    "__version__",
]
