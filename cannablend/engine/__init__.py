"""
Prediction engine: blends strains and predicts an experience profile.

Modules
-------
resolver  : resolve_blend_inputs(): BlendEntry ids -> BlendInput pairs.
predictor : compute_prediction(): pure, no I/O.
ranking   : tag_rank_key() + rank_tags() + select_labels().
explain   : build_explanation(): the human-readable derivation trace.
rounding  : half-away-from-zero rounding, clamp, number formatting.
errors    : EmptyBlendError, WeightSumMismatchError, StrainNotFoundError.
"""
