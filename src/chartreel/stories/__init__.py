"""Story videos: the 30-story catalog and a manifest builder for each story."""

from .catalog import (
    STORIES,
    StoryInfo,
    StoryNotFoundError,
    available,
    build_story,
    built_stories,
    get_story,
    progress,
    register_story,
)

# Importing a builder module registers its story
from . import (  # noqa: F401,E402
    billionaire_pulse,
    blueprint_reality,
    city_stats,
    comic_book_pop,
    credits_finale,
    desktop_chaos,
    dolly_zoom_suspense,
    double_exposure_poet,
    glitch_routine,
    infinite_zoom,
    kinetic_sonder,
    liquid_flow,
    lumafade_dreamscape,
    magazine_flip,
    matchcut_coffee,
    minimalist_listicle,
    morphing_evolution,
    papertear_lookbook,
    parallax_timetravel,
    parallel_split,
    retro_gaming,
    search_mystery,
    sketch_to_life,
    sound_reactive_waveform,
    spacesuit_tracking,
    speedramp_cook,
    thermal_heatmap,
    uisim_breakup,
    vhs_investigation,
    xray_tech,
)

__all__ = [
    "STORIES",
    "StoryInfo",
    "StoryNotFoundError",
    "available",
    "build_story",
    "built_stories",
    "get_story",
    "progress",
    "register_story",
]
