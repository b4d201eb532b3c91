"""Catalog of the 30 story videos and the registry of their builders."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from ..models import Manifest

logger = logging.getLogger(__name__)

StoryBuilder = Callable[[], Manifest]


class StoryNotFoundError(LookupError):
    """Raised when a story number is unknown or has no builder."""


@dataclass(frozen=True)
class StoryInfo:
    """Metadata for one story video."""

    number: int
    title: str
    theme: str
    slug: str
    description: str
    tags: List[str] = field(default_factory=list)

    @property
    def output(self) -> str:
        return f"{self.slug}.mp4"


def _story(number: int, slug: str, title: str, theme: str, description: str, *tags: str) -> StoryInfo:
    return StoryInfo(number, title, theme, f"story-{number:02d}-{slug}", description, list(tags))


STORIES: Dict[int, StoryInfo] = {s.number: s for s in [
    _story(1, "glitch-routine", "Glitch in the Routine", "VFX Narrative - Digital Glitch",
           "A man pours coffee, but the liquid turns into digital pixels. His hand glitches into wireframe.",
           "#VFXNarrative", "#GlitchArt", "#Simulation"),
    _story(2, "kinetic-sonder", "Kinetic Dictionary: SONDER", "Kinetic Typography - High Contrast",
           'A rapid-fire explanation of "Sonder" - the realization that everyone has a complex life.',
           "#KineticTypography", "#Sonder", "#WordOfTheDay"),
    _story(3, "parallax-timetravel", "Parallax Time-Travel: New York 1925", "History/Aesthetic - Sepia Vintage",
           "A 3D journey through a 1920s photograph of busy New York street with parallax depth.",
           "#ParallaxTimeTravel", "#1920s", "#History"),
    _story(4, "matchcut-coffee", "Match-Cut Coffee: London → Santorini", "Seamless Transition - Travel Edit",
           "A traveler sips coffee in rainy London and puts the cup down in sunny Santorini.",
           "#MatchCut", "#TravelEdit", "#Transitions"),
    _story(5, "billionaire-pulse", "Billionaire Pulse: Wealth Comparison", "Data Visualization - Scrolling Receipt",
           "Comparing $1 spending power vs Jeff Bezos net worth using a scrolling receipt visual.",
           "#WealthGap", "#DataViz", "#BillionairePulse"),
    _story(6, "papertear-lookbook", "Paper-Tear Lookbook: Fall/Winter", "Fashion/Handmade - Scrapbook Aesthetic",
           "A model changes outfits by ripping the screen away with torn paper and scotch tape.",
           "#Lookbook", "#Fashion", "#OOTD"),
    _story(7, "lumafade-dreamscape", "Luma-Fade Dreamscape: Golden Hour", "Poetic/Vibe - Dreamy Overexposed",
           "A visual poem about Golden Hour with dreamy light leaks and minimalist serif text.",
           "#GoldenHour", "#Dreamscape", "#VisualPoetry"),
    _story(8, "uisim-breakup", "UI Sim: Breakup", "Screen Narrative - Mobile UI Simulation",
           "A story told through smartphone interface: typing texts, deleting, browsing old photos.",
           "#UISim", "#ScreenNarrative", "#Storytelling"),
    _story(9, "parallel-split", "Parallel Split", "Symmetry Narrative - Split Screen",
           "Two versions of a day: one where the protagonist misses the bus, and one where they catch it.",
           "#ParallelSplit", "#Choices", "#ButterflyEffect"),
    _story(10, "vhs-investigation", "VHS Investigation", "True Crime/Suspense - VHS Found Footage",
           "A found footage snippet of a mysterious door in the woods with analog VHS distortion.",
           "#TrueCrime", "#FoundFootage", "#Mystery"),
    _story(11, "xray-tech", "X-Ray Tech Breakdown", "Visualization - High-Tech X-Ray",
           "A camera pans over a luxury watch, and an X-ray beam reveals the gears inside.",
           "#TechBreakdown", "#XRay", "#Engineering"),
    _story(12, "speedramp-cook", "Speed-Ramp Cook", "Action/Food - High-Energy Cooking",
           "Making a complex ramen bowl in 60 seconds with speed ramping and impact effects.",
           "#SpeedCooking", "#Ramen", "#FoodChallenge"),
    _story(13, "minimalist-listicle", "Minimalist Listicle", "Informative - Apple-Style Minimalist",
           "3 Books That Will Change Your Mindset - clean, white-space heavy aesthetic.",
           "#BookRecommendations", "#MindsetBooks", "#Reading"),
    _story(14, "double-exposure-poet", "Double Exposure Poet", "Artistic - Monochrome Double Exposure",
           "A person reciting a poem about the ocean while waves crash inside their silhouette.",
           "#VisualPoetry", "#DoubleExposure", "#Art"),
    _story(15, "morphing-evolution", "Morphing Evolution", "Concept Change - Automotive Evolution",
           "The evolution of a car from 1920s Model T to futuristic flying concept with morph cuts and timeline slider.",
           "#CarEvolution", "#FutureCars", "#Automotive", "#MorphCut"),
    _story(16, "isometric-city-stats", "Isometric City Stats", "Data/Map - Most Expensive Cities",
           "Comparing the most expensive cities with 3D tilt-shift miniature world and cash pillars "
           "rising from NYC, London, Tokyo.",
           "#CostOfLiving", "#ExpensiveCities", "#DataViz", "#Isometric"),
    _story(17, "blueprint-reality", "Blueprint to Reality", "Architecture - Sketch to Structure",
           "A hand sketches a house on paper, and the lines grow into a real 3D building with technical "
           "callout measurements.",
           "#Architecture", "#Blueprint", "#Design", "#Transformation"),
    _story(18, "comic-book-pop", "Comic Book Pop", "Action/Comedy - Comic Book Panels",
           'Someone tries to open a jar and fails, ending in an epic "superhero" effort with comic book effects.',
           "#ComicBook", "#Comedy", "#PopArt"),
    _story(19, "search-mystery", "Search Engine Mystery", "Text/UI - Spooky Auto-Complete",
           'Someone types "Why am I..." into a search engine, and the auto-complete results tell a spooky story.',
           "#SearchMystery", "#Creepy", "#Horror"),
    _story(20, "liquid-flow", "Liquid Motion Graphic", "Abstract - Fluid Motion Graphics",
           'Explaining the concept of "Flow State" through pure motion graphics with fluid, colorful shapes.',
           "#FlowState", "#MotionGraphics", "#Abstract"),
    _story(21, "magazine-flip", "Magazine Flip", "Fashion Editorial - Glossy Magazine",
           "A model posing in different streetwear looks, presented as a physical magazine being flipped through.",
           "#MagazineFlip", "#Streetwear", "#Editorial"),
    _story(22, "spacesuit-tracking", "Object Tracking Factoid", "Educational - Sci-Fi HUD",
           "Pointing out the features of a new NASA spacesuit with digital tracking lines and floating call-outs.",
           "#Spacesuit", "#NASA", "#TechFacts"),
    _story(23, "retro-gaming", "Retro Gaming UI", "Nostalgia - 8-Bit Tutorial",
           'A "Life Hack" video presented as a Level 1 video game tutorial with 8-bit aesthetics.',
           "#RetroGaming", "#LifeHack", "#8Bit"),
    _story(24, "thermal-heatmap", "Thermal Heat-Map", "Science/Visual - Thermal Imaging",
           'Seeing the "Stress Levels" of people in a busy subway station through thermal imaging visualization.',
           "#ThermalVision", "#Stress", "#Science"),
    _story(25, "dolly-zoom-suspense", "Dolly Zoom Suspense", "Cinematic - Vertigo Effect",
           "A character realizes they are being followed in a library.",
           "#DollyZoom", "#Suspense", "#Cinematic"),
    _story(26, "sound-reactive-waveform", "Sound-Reactive Waveform", "Music/Audio - Atmospheric Teaser",
           "A new indie song teaser with atmospheric visuals and a circular waveform reacting to bass.",
           "#IndieMusic", "#Waveform", "#Teaser"),
    _story(27, "desktop-chaos", "Desktop Chaos", "Work/Relatable - Desktop UI",
           'A visual representation of "Procrastination" - files dragged into a "Tomorrow" folder until the '
           "screen explodes.",
           "#Procrastination", "#DesktopChaos", "#Relatable"),
    _story(28, "sketch-to-life", "Sketch-to-Life", "Travel/Art - Luma Matte",
           'A hand-drawn sketch of the Eiffel Tower suddenly "fills in" with color and becomes a real video.',
           "#SketchToLife", "#Paris", "#Art"),
    _story(29, "infinite-zoom", "Infinite Zoom", "Mind-Bending - Nested Zoom",
           "Zooming into an eye, finding a galaxy, zooming into a planet, and finding that same person again.",
           "#InfiniteZoom", "#MindBending", "#Loop"),
    _story(30, "credits-finale", "Credits Finale", "Ending Series - Credit Roll",
           "A rapid-fire montage of a 30-day challenge ending with a cinematic credit roll.",
           "#30DayChallenge", "#Complete", "#Credits"),
]}

_BUILDERS: Dict[int, StoryBuilder] = {}


def register_story(number: int) -> Callable[[StoryBuilder], StoryBuilder]:
    """Register a manifest builder for a catalog story.

    Raises:
        StoryNotFoundError: If the number is not in the catalog.
    """
    story = get_story(number)

    def decorator(builder: StoryBuilder) -> StoryBuilder:
        _BUILDERS[story.number] = builder
        return builder

    return decorator


def get_story(number: int) -> StoryInfo:
    """Get story metadata.

    Raises:
        StoryNotFoundError: If the number is not in the catalog.
    """
    if number not in STORIES:
        raise StoryNotFoundError(f"Story {number} not found!")
    return STORIES[number]


def available(number: int) -> bool:
    """True if the story has a builder."""
    return number in _BUILDERS


def built_stories() -> List[int]:
    return sorted(_BUILDERS)


def progress() -> Tuple[int, int]:
    """(stories with a builder, stories in the catalog)."""
    return len(_BUILDERS), len(STORIES)


def build_story(number: int) -> Manifest:
    """Build the manifest for a story.

    Raises:
        StoryNotFoundError: If the story is unknown or not built yet.
    """
    story = get_story(number)
    if not available(number):
        raise StoryNotFoundError(f"Story {number} ({story.title}) has not been built yet")

    manifest = _BUILDERS[number]()
    if not manifest.output:
        manifest.output = story.output
    logger.debug(f"Built story {number}: {len(manifest.scenes)} scenes, {manifest.total_duration:.1f}s")
    return manifest
