"""Global constants for midi2melody."""

# MIDI ranges
MIDI_MIN = 0
MIDI_MAX = 127
NUM_PITCHES = 128
NUM_CHANNELS = 16

# Status nibbles
NOTE_OFF = 0x80
NOTE_ON = 0x90

# Silence marker in a melody line
REST = 0

# Emission timing base (ticks per quarter note for generated files).
# Extraction always uses the resolution reported by the input file.
EMISSION_TPQ = 120
DEFAULT_VELOCITY = 64
