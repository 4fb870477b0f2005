"""Integer-only REX supply kernels: plain ints in, ints or frozen results out."""
