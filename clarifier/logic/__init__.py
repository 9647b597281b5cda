"""Pure decoding and answer-collection logic. No I/O."""
