import numpy as np


def _equal(model_gamma, variogram):
    return np.ones_like(model_gamma)


def _npairs(model_gamma, variogram):
    return variogram.bin_num_pairs.astype(float)


def _npairs_over_distance_squared(model_gamma, variogram):
    return variogram.bin_num_pairs / np.square(variogram.bin_distance)


def _cressie(model_gamma, variogram):
    # Guard the start of the optimization where the model may be flat zero.
    return variogram.bin_num_pairs / np.maximum(np.square(model_gamma), np.finfo(float).tiny)


WEIGHT_FUNCTIONS = {
    'equal': _equal,
    'npairs': _npairs,
    'npairs_over_distance_squared': _npairs_over_distance_squared,
    'cressie': _cressie,
}


def cost(x, model, variogram, weight='npairs'):
    r"""
    Weighted least-squares misfit between a covariance model and an empirical variogram.

    .. math::

        c(x) = \sum_k w_k \left( \gamma(h_k; x) - \hat\gamma_k \right)^2

    Parameters
    ----------
    x : ndarray
        Model parameters, e.g. ``(psill, range, nugget)``.

    model : rbfinterp.rbf.CovarianceFunction
        Model whose :meth:`variogram` is evaluated; it is not modified.

    variogram : EmpiricalVariogram

    weight : str
        One of ``equal``, ``npairs``, ``npairs_over_distance_squared``, ``cressie``.

    Returns
    -------
    cost_value : float
    """
    try:
        weight_function = WEIGHT_FUNCTIONS[weight]
    except KeyError as exc:
        raise ValueError("Unknown weight '{}'. Available: {}.".format(weight, sorted(WEIGHT_FUNCTIONS))) from exc
    trial = model.clone()
    trial.set_parameters(np.maximum(x, model.parameter_lower_bounds))
    model_gamma = trial.variogram(variogram.bin_distance)
    residual = model_gamma - variogram.bin_gamma
    return float(np.sum(weight_function(model_gamma, variogram) * np.square(residual)))
