from .num_utils import round_half_up, np_round_half_up, gaussian, frozen_matrix

__all__ = ["round_half_up", "np_round_half_up", "gaussian", "frozen_matrix"]
