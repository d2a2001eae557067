from dataclasses import dataclass

@dataclass(frozen=True)
class StudioConfig:
    # Filenames are <product_name>-<id>-<ratio>.png
    product_name: str = "hausa-scribble"

    # Catalog: seed = id * seed_step + seed_offset
    wallpaper_count: int = 240
    seed_step: int = 1337
    seed_offset: int = 42

    preview_width: int = 300
    export_pause_s: float = 0.2

    # Density slider
    density_default: float = 1.0
    density_min: float = 0.2
    density_max: float = 3.0
    density_step: float = 0.1

    # 1 = draw at target size; >1 renders larger and downsamples (anti-aliasing)
    supersample: int = 1

    def clamp_density(self, density: float) -> float:
        """Snap to the slider grid and keep within [density_min, density_max]."""
        d = max(self.density_min, min(self.density_max, density))
        return round(round(d / self.density_step) * self.density_step, 2)

    def step_density(self, density: float, steps: int) -> float:
        return self.clamp_density(density + steps * self.density_step)

# Global defaults (can be swapped by launcher)
CONFIG = StudioConfig()
