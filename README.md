# tacradio

Front-panel models for a vintage-styled military receiver. They do not
depend on any GUI toolkit. Each model holds the state and the geometry of
one control. Drawing is left to the program that uses it.

## Modules

### `tacradio.theme`

There are five colour schemes in the `Theme` enum: `MILITARY_OLIVE`,
`NAVY_GREY`, `NIGHT_MODE`, `DESERT_TAN` and `BLACK_OPS`.

- `Color` is a frozen RGBA colour. It has `lighter(factor)`,
  `darker(factor)` and `name()`, which returns `#rrggbb`.
- `palette(theme)` returns a `Palette` with a colour for each widget role.
- `background_color`, `panel_color`, `text_color`, `display_color` and
  `meter_color` each return one colour of the scheme.
- `indicator_color(theme, active)` returns the lamp colour. An unlit lamp
  is the text colour made darker.
- `style_sheet(theme)` returns a Qt-style style sheet as text. It holds
  the shared base rules followed by the rules of the theme.
- `theme_name`, `theme_from_name` and `theme_names` work with the display
  names such as `"Night Mode"`. `theme_from_name` falls back to Military
  Olive when it does not know the name.

### `tacradio.knob`

`Knob` is a rotary control. It sweeps from -135° to +135°, with 0°
pointing straight up.

- The range is 0 to 100 by default. An empty or inverted range passed to
  `set_range` is ignored.
- `set_value` clamps the value to the range. When the value changes, it
  notifies every callback registered with `connect`.
- The knob reacts to mouse input:
  - `press` and `release` with the left button start and end a drag.
  - `move` turns the knob by the angle swept around its centre.
  - `wheel(angle_delta)` steps the value by 1% of the range for every 120
    units of `angle_delta`.
- `wrapping` is on by default. While it is on, drag and wheel input wraps
  around the range. When it is off, the input is clamped instead.
- For drawing:
  - `value_to_angle` and `angle_to_value` convert between value and angle.
  - `knob_rect` gives the rectangle of the knob face.
  - `pointer_tip` gives the pixel position of the pointer's tip.
  - `value_text` gives the value as text with one decimal.
  - `resize` sets the size and never goes below 100×120.

### `tacradio.meter`

`Meter` is an analogue S-meter. Its range is -100 to 0 by default, and
its needle sweeps ±60° from vertical.

- `animate()` moves the displayed needle one damped step towards the
  reading. Call it every 20 ms.
- `decay_peak()` lowers the held peak by 0.05, which is 0.5 dB per second
  when called every 100 ms. It never lowers the peak below the current
  value.
- `set_peak_hold` turns peak hold on or off, and `reset_peak` drops the
  peak to the current value.
- `scale_marks()` returns the S-meter scale as `(label, value, angle)`
  triples: S1 to S9, then +20, +40 and +60.
- `rotate_point(point, center, angle)` rotates a point about a centre.

### `tacradio.decoder_panel`

`DecoderPanel` holds the state behind the CTCSS, RDS and ADS-B decoder
tabs.

- `set_frequency` and `set_mode` decide which decoders are available, and
  switch off any that no longer apply:
  - CTCSS is available in FM-Narrow, FM-Wide and AM.
  - RDS is available in FM-Wide between 88 and 108 MHz.
  - ADS-B is available between 1089 and 1091 MHz.
- `set_ctcss_enabled`, `set_rds_enabled` and `set_adsb_enabled` start or
  stop the attached decoder. An attached decoder is any object with
  `start()` and `stop()`. Each switch raises the event
  `"ctcss_enable_changed"`, `"rds_enable_changed"` or
  `"adsb_enable_changed"`, to which you subscribe with
  `connect(event, callback)`.
- The `on_*` handlers take what the decoders report and update the panel:
  - tone and level text, plus a timestamped CTCSS history;
  - programme service, radio text, programme type name, traffic
    announcement flag and clock time;
  - the aircraft table.
- `on_adsb_aircraft_updated(icao, aircraft)` takes an `Aircraft` and
  stores an `AircraftRow` of formatted cells. `aircraft_rows` lists the
  rows in the order they were first seen.
- Timestamps come from the `clock` given to the constructor.
  `datetime.now` is used when no clock is given.

## Example

```python
from tacradio.theme import Theme, display_color, theme_from_name
from tacradio.knob import Knob
from tacradio.meter import Meter
from tacradio.decoder_panel import Aircraft, DecoderPanel

print(display_color(Theme.MILITARY_OLIVE).name())   # '#ff6b00'
night = theme_from_name("Night Mode")                # Theme.NIGHT_MODE

knob = Knob("VOLUME")
knob.connect(lambda v: print("volume", v))
knob.set_value(50)
print(knob.value_to_angle(50))   # 0.0

meter = Meter("SIGNAL")
meter.set_value(-50)
meter.animate()                  # one 20 ms animation step

panel = DecoderPanel()
panel.set_frequency(1090e6)
row = panel.on_adsb_aircraft_updated(0xABC123, Aircraft(callsign="TEST01", altitude=35000))
print(row.cells[:3])             # ('ABC123', 'TEST01', '35000 ft')
```

## What it does not do

The package draws nothing and opens no windows. It does not talk to radio
hardware and does no signal processing. It contains no CTCSS, RDS or
ADS-B decoders. `DecoderPanel` only starts and stops decoder objects that
you supply and shows what they report. Nothing is saved to disk, and the
package has no command-line program.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```