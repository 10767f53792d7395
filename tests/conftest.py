import pytest

COLOR_TYPES_RS = """\
#[derive(Debug, Clone, Copy)]
pub enum Color {
    Red,
    Green,
    Blue,
}

impl From<Color> for &str {
    fn from(color: Color) -> Self {
        match color {
            Color::Red => "Red",
            Color::Green => "Green",
            Color::Blue => "Blue",
        }
    }
}
"""

MIDI_TYPES_RS = """\
impl From<MidiPortFunction> for &str {
    fn from(pf: MidiPortFunction) -> Self {
        match pf {
            MidiPortFunction::Midi => "midi",
            MidiPortFunction::Din24 => "din24",
            MidiPortFunction::Din48 => "din48",
        }
    }
}

impl TryFrom<u8> for MidiPortFunction {
    type Error = ConversionError;
    fn try_from(value: u8) -> Result<Self, Self::Error> {
        match value {
            0 => Ok(Self::Midi),
            _ => Err(ConversionError::Range),
        }
    }
}

impl From<MidiChannel> for &str {
    fn from(mc: MidiChannel) -> Self {
        match mc {
            MidiChannel::Channel(channel) => match channel {
                0 => "1",
                1 => "2",
                _ => unreachable!(),
            },
            MidiChannel::Auto => "auto",
            MidiChannel::Off => "off",
        }
    }
}
"""


@pytest.fixture
def color_types_rs():
    return COLOR_TYPES_RS


@pytest.fixture
def midi_types_rs():
    return MIDI_TYPES_RS


@pytest.fixture
def crate_tree(tmp_path):
    """A small crate with types.rs files at several depths and some decoys."""
    src = tmp_path / "src"
    (src / "kit").mkdir(parents=True)
    (src / "object" / "global").mkdir(parents=True)
    (src / "object" / "sound").mkdir(parents=True)
    (src / "target").mkdir()

    (src / "kit" / "types.rs").write_text(COLOR_TYPES_RS, encoding="utf-8")
    (src / "object" / "global" / "types.rs").write_text(MIDI_TYPES_RS, encoding="utf-8")
    (src / "object" / "sound" / "types.rs").write_text("pub struct Sound;\n", encoding="utf-8")
    (src / "target" / "types.rs").write_text(COLOR_TYPES_RS, encoding="utf-8")

    (src / "kit" / "kit.rs").write_text(COLOR_TYPES_RS, encoding="utf-8")
    (src / "object" / "Types.rs").write_text(COLOR_TYPES_RS, encoding="utf-8")
    (src / "object" / "types.rs.bak").write_text(COLOR_TYPES_RS, encoding="utf-8")
    (src / "object" / "global" / "types").mkdir()
    return tmp_path
