"""morsewave: Latin <-> Morse transcoding and Morse tone rendering.

Pipeline: text -> text_to_code -> code -> synthesize -> samples ->
encode_container -> WAV bytes. The reverse direction is code_to_text.
"""

from morsewave.container import encode_container
from morsewave.synthesize import synthesize
from morsewave.transcode import code_to_text, text_to_code

__all__ = ["code_to_text", "encode_container", "synthesize", "text_to_code"]
