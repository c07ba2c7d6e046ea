"""Pure helpers: GUID codec, spin tokens, traceparent parsing, atomics."""
