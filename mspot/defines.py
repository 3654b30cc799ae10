"""Protocol constants, enumerations and configuration key names for the hotspot."""

from dataclasses import dataclass, fields
from enum import IntEnum


class Mode(IntEnum):
    """Modem operating modes."""

    M17 = 7
    LOCKOUT = 99
    ERROR = 100
    QUIT = 110


class Tag(IntEnum):
    """Tags that mark the kind of a queued modem frame."""

    HEADER = 0x00
    DATA = 0x01
    LOST = 0x02
    EOT = 0x03


DSTAR_MODEM_DATA_LEN = 220


class HardwareType(IntEnum):
    """Known modem hardware variants."""

    MMDVM = 0
    DVMEGA = 1
    MMDVM_ZUMSPOT = 2
    MMDVM_HS_HAT = 3
    MMDVM_HS_DUAL_HAT = 4
    NANO_HOTSPOT = 5
    NANO_DV = 6
    D2RG_MMDVM_HS = 7
    MMDVM_HS = 8
    OPENGD77_HS = 9
    SKYBRIDGE = 10
    UNKNOWN = 11


class RfState(IntEnum):
    """State of the RF side of the repeater."""

    LISTENING = 0
    LATE_ENTRY = 1
    AUDIO = 2
    DATA_AUDIO = 3
    DATA = 4
    REJECTED = 5
    INVALID = 6


class NetState(IntEnum):
    """State of the network side of the repeater."""

    IDLE = 0
    AUDIO = 1
    DATA_AUDIO = 2
    DATA = 3


class DmrOvcm(IntEnum):
    """DMR open voice call mode settings."""

    OFF = 0
    RX_ON = 1
    TX_ON = 2
    ON = 3
    FORCE_OFF = 4


class DstarAck(IntEnum):
    """Kinds of D-Star acknowledgement message."""

    BER = 0
    RSSI = 1
    SMETER = 2


# M17 framing constants
M17_RADIO_SYMBOL_LENGTH = 5  # at 24 kHz sample rate

M17_FRAME_LENGTH_BITS = 384
M17_FRAME_LENGTH_BYTES = M17_FRAME_LENGTH_BITS // 8

M17_LINK_SETUP_SYNC_BYTES = bytes((0x55, 0xF7))
M17_STREAM_SYNC_BYTES = bytes((0xFF, 0x5D))
M17_EOT_SYNC_BYTES = bytes((0x55, 0x5D))

M17_SYNC_LENGTH_BITS = 16
M17_SYNC_LENGTH_BYTES = M17_SYNC_LENGTH_BITS // 8

M17_LSF_LENGTH_BITS = 240
M17_LSF_LENGTH_BYTES = M17_LSF_LENGTH_BITS // 8

M17_LSF_FRAGMENT_LENGTH_BITS = M17_LSF_LENGTH_BITS // 6
M17_LSF_FRAGMENT_LENGTH_BYTES = M17_LSF_FRAGMENT_LENGTH_BITS // 8

M17_LICH_FRAGMENT_LENGTH_BITS = M17_LSF_FRAGMENT_LENGTH_BITS + 8
M17_LICH_FRAGMENT_LENGTH_BYTES = M17_LICH_FRAGMENT_LENGTH_BITS // 8

M17_LSF_FRAGMENT_FEC_LENGTH_BITS = M17_LSF_FRAGMENT_LENGTH_BITS * 2
M17_LSF_FRAGMENT_FEC_LENGTH_BYTES = M17_LSF_FRAGMENT_FEC_LENGTH_BITS // 8

M17_LICH_FRAGMENT_FEC_LENGTH_BITS = M17_LICH_FRAGMENT_LENGTH_BITS * 2
M17_LICH_FRAGMENT_FEC_LENGTH_BYTES = M17_LICH_FRAGMENT_FEC_LENGTH_BITS // 8

M17_PAYLOAD_LENGTH_BITS = 128
M17_PAYLOAD_LENGTH_BYTES = M17_PAYLOAD_LENGTH_BITS // 8

M17_NULL_NONCE = bytes(14)
M17_META_LENGTH_BITS = 112
M17_META_LENGTH_BYTES = M17_META_LENGTH_BITS // 8

M17_FN_LENGTH_BITS = 16
M17_FN_LENGTH_BYTES = M17_FN_LENGTH_BITS // 8

M17_CRC_LENGTH_BITS = 16
M17_CRC_LENGTH_BYTES = M17_CRC_LENGTH_BITS // 8

M17_3200_SILENCE = bytes((0x01, 0x00, 0x09, 0x43, 0x9C, 0xE4, 0x21, 0x08))
M17_1600_SILENCE = bytes((0x0C, 0x41, 0x09, 0x03, 0x0C, 0x41, 0x09, 0x03))

M17_PACKET_TYPE = 0
M17_STREAM_TYPE = 1

M17_DATA_TYPE_DATA = 0x01
M17_DATA_TYPE_VOICE = 0x02
M17_DATA_TYPE_VOICE_DATA = 0x03

M17_ENCRYPTION_TYPE_NONE = 0x00
M17_ENCRYPTION_TYPE_AES = 0x01
M17_ENCRYPTION_TYPE_SCRAMBLE = 0x02

M17_ENCRYPTION_SUB_TYPE_TEXT = 0x00
M17_ENCRYPTION_SUB_TYPE_GPS = 0x01
M17_ENCRYPTION_SUB_TYPE_CALLSIGNS = 0x02


def _with_sync(sync: bytes, data) -> bytes:
    return sync + bytes(data[M17_SYNC_LENGTH_BYTES:])


def add_link_setup_sync(data) -> bytes:
    """Return ``data`` with its leading sync word set to the link setup sync."""
    return _with_sync(M17_LINK_SETUP_SYNC_BYTES, data)


def add_stream_sync(data) -> bytes:
    """Return ``data`` with its leading sync word set to the stream sync."""
    return _with_sync(M17_STREAM_SYNC_BYTES, data)


def add_eot_sync(data) -> bytes:
    """Return ``data`` with its leading sync word set to the end-of-transmission sync."""
    return _with_sync(M17_EOT_SYNC_BYTES, data)


class _Section:
    section: str

    def keys(self) -> tuple:
        """Key names of this section, not counting the section name."""
        return tuple(
            getattr(self, f.name) for f in fields(self) if f.name != "section"
        )


@dataclass(frozen=True)
class RepeaterKeys(_Section):
    section: str = "Repeater"
    callsign: str = "Callsign"
    module: str = "Module"
    time_out: str = "Timeout"
    is_duplex: str = "IsDuplex"
    is_daemon: str = "IsDaemon"
    allow_encrypt: str = "AllowEncrypt"
    user: str = "UserName"
    can: str = "CAN"
    is_private: str = "IsPrivate"
    debug: str = "Debug"


@dataclass(frozen=True)
class LogKeys(_Section):
    section: str = "Log"
    display_level: str = "DisplayLevel"
    file_level: str = "FileLevel"
    file_path: str = "FilePath"
    file_name: str = "FileName"
    rotate: str = "FileRotate"


@dataclass(frozen=True)
class CwIdKeys(_Section):
    section: str = "CW Id"
    enable: str = "Enable"
    time: str = "Time"
    message: str = "Message"


@dataclass(frozen=True)
class ModemKeys(_Section):
    section: str = "Modem"
    protocol: str = "Protocol"
    uart_port: str = "UartPort"
    uart_speed: str = "UartSpeed"
    i2c_port: str = "I2CPort"
    i2c_address: str = "I2CAddress"
    modem_address: str = "ModemAddress"
    modem_port: str = "ModemPort"
    local_address: str = "LocalAddress"
    local_port: str = "LocalPort"
    rx_freq: str = "RXFrequency"
    tx_freq: str = "TXFrequency"
    rx_offset: str = "RXOffset"
    tx_offset: str = "TXOffset"
    rx_dc_offset: str = "RXDCOffset"
    tx_dc_offset: str = "TXDCOffset"
    rx_invert: str = "RXInvert"
    tx_invert: str = "TXInvert"
    ptt_invert: str = "PTTInvert"
    tx_hang: str = "TXHang"
    tx_delay: str = "TXDelay"
    tx_level: str = "TXLevel"
    rx_level: str = "RXLevel"
    rf_level: str = "RFLevel"
    cw_level: str = "CWLevel"
    rssi_map_file: str = "RssiMapFilePath"
    trace: str = "Trace"
    debug: str = "Debug"


@dataclass(frozen=True)
class GatewayKeys(_Section):
    section: str = "Gateway"
    ipv4: str = "EnableIPv4"
    ipv6: str = "EnableIPv6"
    startup_link: str = "StartupLink"
    maintain_link: str = "MaintainLink"
    host_path: str = "HostPath"
    my_host_path: str = "MyHostPath"
    allow_not_transcoded: str = "AllowNotTranscoded"
    audio_folder: str = "AudioFolderPath"


class JsonKeys:
    """Configuration section and key names."""

    repeater = RepeaterKeys()
    log = LogKeys()
    cwid = CwIdKeys()
    modem = ModemKeys()
    gateway = GatewayKeys()

    @classmethod
    def sections(cls) -> tuple:
        """All configuration sections in their defined order."""
        return (cls.repeater, cls.log, cls.cwid, cls.modem, cls.gateway)