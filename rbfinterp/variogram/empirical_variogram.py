import numpy as np
from scipy.spatial.distance import pdist


class EmpiricalVariogram:
    r"""
    Binned empirical semivariogram of scattered 3D data.

    Each pair of points at distance :math:`h_{ij}` falls in bin
    :math:`\lfloor h_{ij} / w \rfloor`; pairs beyond the last bin are ignored.
    Bin :math:`k` stores

    .. math::

        \hat\gamma_k = \frac{1}{N_k} \sum_{(i, j) \in k} \frac{1}{2} (v_i - v_j)^2

    together with the mean pair distance and the pair count :math:`N_k`. Bins
    without pairs are dropped.

    Parameters
    ----------
    points : ndarray of shape (m, 3)

    values : ndarray of shape (m,)

    bin_width : float

    n_bins : int
    """

    def __init__(self, points, values, bin_width, n_bins):
        points = np.asarray(points, dtype=float)
        values = np.asarray(values, dtype=float)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError("Points must be an array of shape (m, 3), got {}.".format(points.shape))
        if values.shape != (points.shape[0],):
            raise ValueError("Expected {} values, got shape {}.".format(points.shape[0], values.shape))
        if bin_width <= 0:
            raise ValueError("bin_width must be positive.")
        if n_bins < 1:
            raise ValueError("n_bins must be at least 1.")
        self.bin_width = float(bin_width)
        self.n_bins = int(n_bins)

        distances = pdist(points)
        semivariances = 0.5 * pdist(values.reshape(-1, 1), metric='sqeuclidean')
        bins = np.floor(distances / self.bin_width).astype(int)
        keep = bins < self.n_bins
        bins = bins[keep]
        counts = np.bincount(bins, minlength=self.n_bins)
        distance_sums = np.bincount(bins, weights=distances[keep], minlength=self.n_bins)
        gamma_sums = np.bincount(bins, weights=semivariances[keep], minlength=self.n_bins)

        nonempty = counts > 0
        self.bin_num_pairs = counts[nonempty]
        self.bin_distance = distance_sums[nonempty] / self.bin_num_pairs
        self.bin_gamma = gamma_sums[nonempty] / self.bin_num_pairs

    def __len__(self):
        return self.bin_distance.shape[0]
