"""Toolkit-independent front-panel models: themes, rotary knob, S-meter and decoder panel."""

__version__ = "1.0.0"
__all__ = ["theme", "knob", "meter", "decoder_panel"]