"""Shopping Orders: order admission and queries gated by remote feature flags."""
