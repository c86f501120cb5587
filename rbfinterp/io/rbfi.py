import json
import os

import numpy as np


RBFI_FORMAT = "rbfinterp.interpolant/1.0"


def ensure_rbfi_path(path) -> str:
    """Return ``path`` as a string ending in a lower-case ``.rbfi`` extension."""
    path = os.fspath(path)
    if path.lower().endswith(".rbfi.npz"):
        path = path[:-len(".npz")]
    if path.lower().endswith(".rbfi"):
        return path[:-len(".rbfi")] + ".rbfi"
    return path + ".rbfi"


def write_rbfi(interpolant, path) -> str:
    """
    Serialize a fitted Interpolant into a .rbfi file.

    The .rbfi container is a compressed NumPy archive written with a .rbfi
    extension. It holds the kernel description and polynomial degree as JSON
    metadata, plus the centers, RBF weights and polynomial coefficients.

    Parameters
    ----------
    interpolant : rbfinterp.interpolant.Interpolant
        A fitted interpolant.
    path : str or os.PathLike
        Output filename. If no ".rbfi" extension is provided, it will be added.

    Returns
    -------
    str
        The path written.
    """
    if not interpolant.fitted:
        raise ValueError("Interpolant is not fitted. Call interpolant.fit() before saving.")

    out_path = ensure_rbfi_path(path)
    meta = {
        "format": RBFI_FORMAT,
        "rbf": type(interpolant.rbf).__name__,
        "parameters": [float(p) for p in interpolant.rbf.parameters],
        "nugget": float(interpolant.rbf.nugget),
        "poly_degree": int(interpolant.poly_degree),
    }
    meta_json = json.dumps(meta)
    arrays = {
        "__meta__": np.frombuffer(meta_json.encode("utf-8"), dtype=np.uint8),
        "centers": np.asarray(interpolant.centers, dtype=np.float64),
        "weights": np.asarray(interpolant.weights, dtype=np.float64),
        "polynomial_coefficients": np.asarray(interpolant.polynomial_coefficients, dtype=np.float64),
    }
    # Use a file handle to avoid NumPy forcing a .npz extension
    with open(out_path, "wb") as fh:
        np.savez_compressed(fh, **arrays)
    return out_path


def read_rbfi(path):
    """
    Deserialize an Interpolant from a .rbfi file.

    The returned interpolant can be evaluated but carries no solver, so
    :meth:`Interpolant.refit` is unavailable until :meth:`Interpolant.fit` runs.
    """
    from ..interpolant import Interpolant
    from ..polynomial import dimension
    from ..rbf import make_rbf

    file_path = ensure_rbfi_path(path)
    with np.load(file_path, allow_pickle=False) as data:
        if "__meta__" not in data:
            raise ValueError("Invalid .rbfi file: missing metadata.")
        meta = json.loads(bytes(data["__meta__"].tolist()).decode("utf-8"))
        if not isinstance(meta, dict) or meta.get("format") != RBFI_FORMAT:
            raise ValueError("Unsupported .rbfi format or version.")
        centers = np.asarray(data["centers"], dtype=np.float64)
        weights = np.asarray(data["weights"], dtype=np.float64)
        coefficients = np.asarray(data["polynomial_coefficients"], dtype=np.float64)

    poly_degree = int(meta["poly_degree"])
    if centers.ndim != 2 or centers.shape[1] != 3:
        raise ValueError("Invalid .rbfi file: centers must have shape (m, 3), got {}.".format(centers.shape))
    if weights.shape != (centers.shape[0],):
        raise ValueError("Invalid .rbfi file: {} centers but weights of shape {}.".format(
            centers.shape[0], weights.shape))
    if coefficients.shape != (dimension(poly_degree),):
        raise ValueError("Invalid .rbfi file: degree {} drift needs {} polynomial coefficients, got shape {}.".format(
            poly_degree, dimension(poly_degree), coefficients.shape))

    rbf = make_rbf(meta["rbf"], meta["parameters"], nugget=meta.get("nugget", 0.0))
    interpolant = Interpolant(rbf, poly_degree)
    interpolant.centers = centers
    interpolant.weights = weights
    interpolant.polynomial_coefficients = coefficients
    return interpolant
