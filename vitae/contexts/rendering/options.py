"""
Rasterizer options.

Options mirror the configuration record of browser-side HTML-to-PDF tools
(margin, filename, image encoding, scale, CORS, page geometry, page-break
modes). They are loaded from pdf_presets.yaml with OmegaConf and passed to the
rasterizer untouched apart from the page geometry and filename.

Examples:
    # Defaults
    >>> options = load_rasterizer_options()

    # Composable presets (later overrides earlier) plus ad-hoc overrides
    >>> options = load_rasterizer_options(["margins_none", "pagebreak_css_only"], {"scale": 1})
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.rendering.geometry import PageGeometry

load_dotenv()
PDF_PRESETS_PATH = Path(os.getenv("VITAE_PDF_PRESETS_PATH", Path(__file__).parent / "pdf_presets.yaml"))

PAGEBREAK_MODES = ("avoid-all", "css", "legacy")

# Chromium rejects print scales outside this range
MIN_PRINT_SCALE = 0.1
MAX_PRINT_SCALE = 2.0


@dataclass(frozen=True)
class RasterizerOptions:
    """
    Configuration record handed to the rasterizer.

    Attributes:
        margin: (top, right, bottom, left) margins in mm
        filename: Output file name
        image_type: Raster image encoding for canvas-based rasterizers
        image_quality: Raster image quality (0-1)
        scale: Canvas/device scale factor
        use_cors: Load cross-origin images
        print_background: Print background colors and images
        page_format: Named page format, or (width, height) in mm for custom pages
        orientation: "portrait" or "landscape"
        compress: Compress the PDF stream
        pagebreak_modes: Any of "avoid-all", "css", "legacy"
    """

    margin: Tuple[float, float, float, float] = (5.0, 5.0, 5.0, 5.0)
    filename: str = "resume.pdf"
    image_type: str = "jpeg"
    image_quality: float = 0.98
    scale: float = 2.0
    use_cors: bool = True
    print_background: bool = True
    page_format: Any = "a4"
    orientation: str = "portrait"
    compress: bool = True
    pagebreak_modes: Tuple[str, ...] = PAGEBREAK_MODES
    geometry: Optional[PageGeometry] = field(default=None, compare=False)

    def __post_init__(self):
        unknown = [mode for mode in self.pagebreak_modes if mode not in PAGEBREAK_MODES]
        if unknown:
            raise ValueError(f"Unknown pagebreak mode(s) {unknown}. Allowed: {list(PAGEBREAK_MODES)}")
        if len(self.margin) != 4:
            raise ValueError(f"margin must have 4 values (top, right, bottom, left), got {self.margin}")

    @property
    def avoid_all_breaks(self) -> bool:
        return "avoid-all" in self.pagebreak_modes

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "RasterizerOptions":
        """Build options from the nested preset layout of pdf_presets.yaml."""
        image = config.get("image", {})
        page = config.get("page", {})
        pagebreak = config.get("pagebreak", {})
        return cls(
            margin=tuple(float(m) for m in config.get("margin", cls.margin)),
            filename=config.get("filename", cls.filename),
            image_type=image.get("type", cls.image_type),
            image_quality=float(image.get("quality", cls.image_quality)),
            scale=float(config.get("scale", cls.scale)),
            use_cors=bool(config.get("use_cors", cls.use_cors)),
            print_background=bool(config.get("print_background", cls.print_background)),
            page_format=page.get("format", cls.page_format),
            orientation=page.get("orientation", cls.orientation),
            compress=bool(page.get("compress", cls.compress)),
            pagebreak_modes=tuple(pagebreak.get("mode", PAGEBREAK_MODES)),
        )

    def with_geometry(self, geometry: PageGeometry, filename: Optional[str] = None) -> "RasterizerOptions":
        """Copy of these options targeting a computed page geometry."""
        page_format = geometry.page_format or [geometry.width_mm, geometry.height_mm]
        return replace(
            self,
            filename=filename or self.filename,
            margin=geometry.margins_mm,
            page_format=page_format,
            orientation=geometry.orientation,
            geometry=geometry,
        )

    def to_pdf_kwargs(self, path: Optional[Path] = None) -> Dict[str, Any]:
        """
        Translate to Chromium page.pdf() keyword arguments.

        Image encoding, CORS and compression have no Chromium equivalent and
        are not forwarded.
        """
        top, right, bottom, left = self.margin
        kwargs: Dict[str, Any] = {
            "print_background": self.print_background,
            "landscape": self.orientation == "landscape",
            "margin": {
                "top": f"{top}mm",
                "right": f"{right}mm",
                "bottom": f"{bottom}mm",
                "left": f"{left}mm",
            },
        }

        if isinstance(self.page_format, str):
            kwargs["format"] = self.page_format.upper()
        else:
            width, height = self.page_format
            kwargs["width"] = f"{width:.3f}mm"
            kwargs["height"] = f"{height:.3f}mm"

        if self.geometry is not None:
            kwargs["scale"] = min(max(self.geometry.scale, MIN_PRINT_SCALE), MAX_PRINT_SCALE)
            if not self.geometry.paginated:
                # PX_TO_MM rounding can leave sub-pixel overflow that Chromium
                # would spill onto a blank second page
                kwargs["page_ranges"] = "1"

        if path is not None:
            kwargs["path"] = str(path)

        return kwargs


def load_pdf_presets(config_path: Path = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Load pdf_presets.yaml.

    Collapses nested preset structure: margins.none -> margins_none

    Returns:
        Tuple of (base config, flattened presets)
    """
    if config_path is None:
        config_path = PDF_PRESETS_PATH

    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in (raw.get("presets") or {}).items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return raw.get("base") or {}, flattened


def load_rasterizer_options(
    preset_names: Sequence[str] = (),
    overrides: Optional[Dict[str, Any]] = None,
    config_path: Path = None,
) -> RasterizerOptions:
    """
    Build rasterizer options from the base config, named presets and overrides.

    Args:
        preset_names: Presets to apply in order (e.g., ["margins_none"])
        overrides: Nested config values applied last
        config_path: Optional path to pdf_presets.yaml

    Returns:
        RasterizerOptions

    Raises:
        ValueError: If a preset is unknown or the merged config is invalid
    """
    base, presets = load_pdf_presets(config_path)

    layers: List[Any] = [OmegaConf.create(base)]
    for preset_name in preset_names:
        if preset_name not in presets:
            available = list(presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")
        layers.append(OmegaConf.create(presets[preset_name]))
    if overrides:
        layers.append(OmegaConf.create(overrides))

    merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)
    return RasterizerOptions.from_config(merged)
