"""Qwen3 TTS Flash voice configuration data.

Defines the predefined voices accepted by the qwen3-tts-flash and
qwen3-tts-flash-realtime models. The ``voice_id`` of each record is the
exact value to send as the ``voice`` request parameter.

Dialect voices carry the dialect as a prefix of their display name
(e.g. "上海-阿珍"). Note that the Nanjing voice id is lower-case ``li``.
"""

from dataclasses import dataclass
from enum import Enum


class Gender(Enum):
    """Gender of a voice, for informational and filtering purposes."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class VoiceRecord:
    """One selectable synthetic voice.

    Attributes:
        voice_id: Identifier sent to the speech service.
        display_name: Human friendly name (typically Chinese).
        gender: Gender of the voice.
        description: Short description of the voice characteristics.
    """

    voice_id: str
    display_name: str
    gender: Gender
    description: str

    @property
    def label(self):
        """Label used by selection widgets, e.g. "芊悦 (Cherry)"."""
        return f"{self.display_name} ({self.voice_id})"


# Declaration order is the catalog order.
QWEN3_TTS_FLASH_VOICES = (
    # Mandarin / English
    VoiceRecord("Cherry", "芊悦", Gender.FEMALE,
                "A sunny, positive, friendly, and natural young woman"),
    VoiceRecord("Ethan", "晨煦", Gender.MALE,
                "A bright, warm, energetic, and vibrant male voice with a standard Mandarin"
                " pronunciation and a slight northern accent"),
    VoiceRecord("Nofish", "不吃鱼", Gender.MALE,
                "A male designer who cannot pronounce retroflex sounds"),
    VoiceRecord("Jennifer", "詹妮弗", Gender.FEMALE,
                "A premium, cinematic American English female voice"),
    VoiceRecord("Ryan", "甜茶", Gender.MALE,
                "A rhythmic and dramatic voice with a sense of realism and tension"),
    VoiceRecord("Katerina", "卡捷琳娜", Gender.FEMALE,
                "A mature female voice with a rich rhythm and lingering resonance"),
    VoiceRecord("Elias", "墨讲师", Gender.MALE,
                "A voice that maintains academic rigor while using storytelling techniques to"
                " transform complex knowledge into digestible cognitive modules"),

    # Dialects
    VoiceRecord("Jada", "上海-阿珍", Gender.FEMALE, "An energetic woman from Shanghai"),
    VoiceRecord("Dylan", "北京-晓东", Gender.MALE,
                "A teenage boy who grew up in the hutongs of Beijing"),
    VoiceRecord("Sunny", "四川-晴儿", Gender.FEMALE,
                "The voice of a Sichuan girl whose sweetness melts your heart"),
    VoiceRecord("li", "南京-老李", Gender.MALE, "Patient male yoga instructor"),
    VoiceRecord("Marcus", "陕西-秦川", Gender.MALE,
                "A voice that is broad-faced and brief-spoken, sincere-hearted and deep-voiced—the"
                " authentic flavor of Shaanxi"),
    VoiceRecord("Roy", "闽南-阿杰", Gender.MALE,
                "The voice of a humorous, straightforward, and lively young Taiwanese man"),
    VoiceRecord("Peter", "天津-李彼得", Gender.MALE,
                "The voice of a professional straight man in Tianjin crosstalk"),
    VoiceRecord("Rocky", "粤语-阿强", Gender.MALE,
                "The voice of the humorous and witty Rocky, here for online chatting"),
    VoiceRecord("Kiki", "粤语-阿清", Gender.FEMALE, "A sweet female companion from Hong Kong"),
    VoiceRecord("Eric", "四川-程川", Gender.MALE, "An unconventional man from Chengdu, Sichuan"),
)

# Format: (Voice ID, Label)
QWEN3_TTS_VOICE_OPTIONS = [(v.voice_id, v.label) for v in QWEN3_TTS_FLASH_VOICES]
