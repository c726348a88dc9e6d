"""
Seed values for a fresh prompt-builder session.

Seed entity ids are fixed so that a reset document serializes to the same
bytes every time.
"""

from .models import (
    SEED_CHARACTER_NAME,
    AudioDirection,
    Character,
    GenerationSettings,
    ProjectInfo,
    SceneBeat,
    SessionState,
    VisualLanguage,
)

SEED_CHARACTER_ID = "seedchar01"
SEED_BEAT_ID = "seedbeat01"

DIRECTOR_NOTES = (
    "Ensure Veo 3.1 keeps character faces locked between shots. Prioritise cinematic motion, "
    "premium lighting, and coherent mise-en-scène across the sequence."
)

DEFAULT_PROJECT = ProjectInfo(
    title="Working Title",
    logline="",
    brain_dump="",
    runtime_seconds=45,
    aspect_ratio="16:9",
    target_emotion="Awe and inspiration",
    pacing="Deliberate cinematic pacing with escalating tension",
    call_to_action="End card with brand lockup and CTA overlay",
    budget_level="blockbuster",
)

DEFAULT_VISUAL_LANGUAGE = VisualLanguage(
    cinematography_style="Prestige streaming series look with premium high-budget polish",
    lighting="Motivated lighting with subtle volumetrics, cinematic contrast, and golden hour highlights",
    color_palette="Rich complementary tones with painterly teals and ambers, heightened saturation on key accents",
    art_direction="Production design with handcrafted texture, premium props, and lived-in environments",
    camera_movement="Controlled technocrane moves, gliding steadicam, and purposeful dolly pushes",
    lensing="Cooke anamorphic equivalent, shallow depth of field, occasional macro inserts",
    texture_and_fx="Cinematic film grain, practical atmospheric haze, restrained cinematic particles",
    references=(
        "References: Denis Villeneuve wide shots, Michael Mann night exterior energy, "
        "Apple Vision Pro launch films"
    ),
)

DEFAULT_AUDIO = AudioDirection(
    voice_over_tone="Warm authoritative narrator delivering emotional progression",
    dialogue_notes="Keep dialogue minimal; focus on resonant keywords only",
    music="Hybrid orchestral score with modern synth layers and swelling crescendos",
    sound_design=(
        "Layered cinematic sound design: whooshes timed to camera moves, tactile foley, subtle risers"
    ),
)

DEFAULT_GENERATION_SETTINGS = GenerationSettings(
    motion_intensity="cinematic",
    camera_rig="Virtual technocrane with precise keyframes for hero shots",
    render_quality="ultra",
    seed_control="Lock seed for character consistency across shots",
    negative_prompts=(
        "Avoid cartoonish looks, avoid amateur lighting, avoid jittery handheld motion, "
        "avoid inconsistent character faces"
    ),
    delivery_format="4K UHD master, ProRes proxy for review, 10-bit color",
)

DEFAULT_CHARACTERS = (
    Character(
        id=SEED_CHARACTER_ID,
        name=SEED_CHARACTER_NAME,
        role="Visionary innovator and emotional anchor",
        backstory=(
            "Leader who transforms ambitious ideas into reality; calm confidence with a spark of curiosity"
        ),
        visual_traits=(
            "Diverse casting, soulful eyes, consistent facial structure, cinematic lighting on skin"
        ),
        wardrobe="Premium tailored wardrobe with subtle texture, elevated sneakers, watch as hero prop",
        performance_notes="Intentional micro-expressions, focused gaze, relaxed power in body language",
        consistency_keys=(
            "Maintain same character model across all beats; ensure identical facial structure and hair"
        ),
    ),
)

DEFAULT_SCENE_BEATS = (
    SceneBeat(
        id=SEED_BEAT_ID,
        label="Opening Hero Shot",
        timestamp="0s - 5s",
        objective="Establish the world and immediately signal premium scale",
        setting="Dawn exterior rooftop overlooking futuristic skyline",
        action="Hero stands center frame facing city as camera dolly-pushes in",
        emotional_beat="Anticipation, sense of limitless potential",
        cinematography="Wide anamorphic establishing, volumetric light shafts, dramatic reveal of skyline",
        transitions="Match dissolve from logo reveal into next beat",
        voice_over="Narrator introduces the idea of orchestrating visions into tangible experiences",
    ),
)

NEW_CHARACTER_NAME = "New Character"
NEW_CHARACTER_ROLE = "Supporting role"


def default_state() -> SessionState:
    return SessionState(
        project=DEFAULT_PROJECT,
        visual_language=DEFAULT_VISUAL_LANGUAGE,
        characters=DEFAULT_CHARACTERS,
        scene_beats=DEFAULT_SCENE_BEATS,
        audio=DEFAULT_AUDIO,
        generation_settings=DEFAULT_GENERATION_SETTINGS,
    )
