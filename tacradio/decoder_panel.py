"""State and behaviour of the digital decoder panel (CTCSS, RDS, ADS-B)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Protocol, Tuple

EnableCallback = Callable[[bool], None]
Clock = Callable[[], datetime]

CTCSS_ENABLE_CHANGED = "ctcss_enable_changed"
RDS_ENABLE_CHANGED = "rds_enable_changed"
ADSB_ENABLE_CHANGED = "adsb_enable_changed"
EVENTS = (CTCSS_ENABLE_CHANGED, RDS_ENABLE_CHANGED, ADSB_ENABLE_CHANGED)

CTCSS_MODES = ("FM-Narrow", "FM-Wide", "AM")
RDS_BAND = (88e6, 108e6)
ADSB_BAND = (1089e6, 1091e6)

ADSB_UPDATE_INTERVAL = 1.0  # seconds between aircraft count refreshes

_NO_TONE = "---.- Hz"
_NO_LEVEL = "-- dB"
_NO_PI = "----"
_NO_PS = "--------"
_NO_PTY = "None"
_NO_CLOCK = "--:--"


class Decoder(Protocol):
    """A decoder the panel can start and stop."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


@dataclass(frozen=True)
class Aircraft:
    """What an ADS-B decoder reports about one aircraft."""

    callsign: str = ""
    altitude: float = 0.0
    ground_speed: float = 0.0
    track: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    vertical_rate: float = 0.0
    on_ground: bool = False


@dataclass(frozen=True)
class AircraftRow:
    """One row of the aircraft table, as displayed text."""

    icao: int
    icao_text: str
    callsign: str
    altitude: str
    speed: str
    track: str
    latitude: str
    longitude: str
    last_seen: str

    @property
    def cells(self) -> Tuple[str, ...]:
        """The eight displayed columns, left to right."""
        return (
            self.icao_text, self.callsign, self.altitude, self.speed,
            self.track, self.latitude, self.longitude, self.last_seen,
        )


def _decibels(level: float) -> float:
    if level > 0:
        return 20 * math.log10(level)
    if level == 0:
        return -math.inf
    return math.nan


class DecoderPanel:
    """The decoder panel: enable switches, readouts and the aircraft table.

    Decoders are owned elsewhere; the panel only starts and stops them and
    shows what they report through the ``on_*`` handlers.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or datetime.now
        self._listeners: Dict[str, List[EnableCallback]] = {e: [] for e in EVENTS}
        self.frequency = 0.0
        self.mode = ""

        self.ctcss_decoder: Optional[Decoder] = None
        self.rds_decoder: Optional[Decoder] = None
        self.adsb_decoder: Optional[Decoder] = None

        self.ctcss_available = True
        self.ctcss_enabled = False
        self.ctcss_tone_text = _NO_TONE
        self.ctcss_level_text = _NO_LEVEL
        self.ctcss_status = "Idle"
        self.ctcss_history: List[str] = []

        self.rds_available = True
        self.rds_enabled = False
        self.rds_pi_text = _NO_PI
        self.rds_ps_text = _NO_PS
        self.rds_pty_text = _NO_PTY
        self.rds_clock_text = _NO_CLOCK
        self.rds_ta_text = "TA: OFF"
        self.rds_ta_active = False
        self.rds_tp_text = "TP: OFF"
        self.rds_ms_text = "Music"
        self.rds_radio_text = ""

        self.adsb_available = True
        self.adsb_enabled = False
        self.adsb_updating = False
        self.adsb_count_text = "Aircraft: 0"
        self.adsb_message_text = "Messages: 0"
        self._rows: Dict[int, AircraftRow] = {}

    @property
    def aircraft_rows(self) -> Tuple[AircraftRow, ...]:
        """The aircraft table rows in the order they were first seen."""
        return tuple(self._rows.values())

    def connect(self, event: str, callback: EnableCallback) -> None:
        """Call ``callback`` with the new state when a decoder switch changes."""
        if event not in self._listeners:
            raise ValueError(f"unknown event: {event!r}")
        self._listeners[event].append(callback)

    def _emit(self, event: str, enabled: bool) -> None:
        for callback in list(self._listeners[event]):
            callback(enabled)

    def _timestamp(self) -> str:
        return self._clock().strftime("%H:%M:%S")

    # Decoders and tuning

    def set_ctcss_decoder(self, decoder: Optional[Decoder]) -> None:
        self.ctcss_decoder = decoder

    def set_rds_decoder(self, decoder: Optional[Decoder]) -> None:
        self.rds_decoder = decoder

    def set_adsb_decoder(self, decoder: Optional[Decoder]) -> None:
        self.adsb_decoder = decoder

    def set_frequency(self, frequency: float) -> None:
        self.frequency = frequency
        self.update_decoder_availability()

    def set_mode(self, mode: str) -> None:
        self.mode = mode
        self.update_decoder_availability()

    def update_decoder_availability(self) -> None:
        """Offer each decoder only where it applies, switching off the rest."""
        self.ctcss_available = self.mode in CTCSS_MODES
        if not self.ctcss_available and self.ctcss_enabled:
            self.set_ctcss_enabled(False)

        low, high = RDS_BAND
        self.rds_available = self.mode == "FM-Wide" and low <= self.frequency <= high
        if not self.rds_available and self.rds_enabled:
            self.set_rds_enabled(False)

        low, high = ADSB_BAND
        self.adsb_available = low <= self.frequency <= high
        if not self.adsb_available and self.adsb_enabled:
            self.set_adsb_enabled(False)

    # CTCSS

    def set_ctcss_enabled(self, enabled: bool) -> None:
        """Flip the CTCSS switch; nothing happens if it is already so."""
        if enabled == self.ctcss_enabled:
            return
        self.ctcss_enabled = enabled
        if self.ctcss_decoder is not None:
            if enabled:
                self.ctcss_decoder.start()
                self.ctcss_status = "Searching..."
            else:
                self.ctcss_decoder.stop()
                self.ctcss_status = "Disabled"
                self.ctcss_tone_text = _NO_TONE
                self.ctcss_level_text = _NO_LEVEL
        self._emit(CTCSS_ENABLE_CHANGED, enabled)

    def on_ctcss_tone_detected(self, frequency: float, level: float) -> None:
        self.ctcss_tone_text = f"{frequency:.1f} Hz"
        self.ctcss_level_text = f"{_decibels(level):.1f} dB"
        self.ctcss_status = "Tone Detected"
        self.ctcss_history.append(
            f"{self._timestamp()} - Detected: {frequency:.1f} Hz"
        )

    def on_ctcss_tone_lost(self) -> None:
        self.ctcss_status = "Searching..."
        self.ctcss_history.append(f"{self._timestamp()} - Tone lost")

    # RDS

    def set_rds_enabled(self, enabled: bool) -> None:
        """Flip the RDS switch; enabling clears the station readouts."""
        if enabled == self.rds_enabled:
            return
        self.rds_enabled = enabled
        if self.rds_decoder is not None:
            if enabled:
                self.rds_decoder.start()
                self.rds_pi_text = _NO_PI
                self.rds_ps_text = _NO_PS
                self.rds_pty_text = _NO_PTY
                self.rds_radio_text = ""
                self.rds_clock_text = _NO_CLOCK
            else:
                self.rds_decoder.stop()
        self._emit(RDS_ENABLE_CHANGED, enabled)

    def on_rds_program_service_changed(self, ps: str) -> None:
        self.rds_ps_text = ps or _NO_PS

    def on_rds_radio_text_changed(self, rt: str) -> None:
        self.rds_radio_text = rt

    def on_rds_program_type_changed(self, name: str) -> None:
        """Show the programme type by its display name."""
        self.rds_pty_text = name

    def on_rds_traffic_announcement_changed(self, ta: bool) -> None:
        self.rds_ta_text = "TA: ON" if ta else "TA: OFF"
        self.rds_ta_active = ta

    def on_rds_clock_time_received(self, ct: datetime) -> None:
        self.rds_clock_text = ct.strftime("%H:%M")

    # ADS-B

    def set_adsb_enabled(self, enabled: bool) -> None:
        """Flip the ADS-B switch; enabling empties the aircraft table."""
        if enabled == self.adsb_enabled:
            return
        self.adsb_enabled = enabled
        if self.adsb_decoder is not None:
            if enabled:
                self.adsb_decoder.start()
                self.adsb_updating = True
                self._rows.clear()
            else:
                self.adsb_decoder.stop()
                self.adsb_updating = False
        self._emit(ADSB_ENABLE_CHANGED, enabled)

    def on_adsb_aircraft_updated(self, icao: int, aircraft: Aircraft) -> AircraftRow:
        """Add or refresh the table row for ``icao`` and return it."""
        row = AircraftRow(
            icao=icao,
            icao_text=f"{icao:06X}",
            callsign=aircraft.callsign,
            altitude=f"{aircraft.altitude:.0f} ft",
            speed=f"{aircraft.ground_speed:.0f} kt",
            track=f"{aircraft.track:.0f}°",
            latitude=f"{aircraft.latitude:.4f}",
            longitude=f"{aircraft.longitude:.4f}",
            last_seen=self._timestamp(),
        )
        self._rows[icao] = row
        return row

    def on_adsb_aircraft_lost(self, icao: int) -> None:
        self._rows.pop(icao, None)

    def clear_adsb(self) -> None:
        self._rows.clear()

    def update_adsb_display(self) -> None:
        """Refresh the aircraft count when a decoder is attached."""
        if self.adsb_decoder is not None:
            self.adsb_count_text = f"Aircraft: {len(self._rows)}"