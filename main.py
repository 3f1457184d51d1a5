# -*- coding: utf-8 -*-
# OHGrid/main.py

"""
End-to-end driver:
  1) Parse options (CLI flags over an optional JSON options file)
  2) Open the model (.json → in-memory kernel, .geo → Gmsh kernel)
  3) Select 4 curves (flags or blocking prompt)
  4) Build the OH decomposition (+ optional relaxation)
  5) Write the model / mesh and an optional preview plot

Examples:
    python main.py square.json --curves 1 2 3 4 --radial-dimension 9 --alpha 0.4 --out oh.json
    python main.py square.geo --curves 1 2 3 4 --msh oh.msh
"""

import argparse
import logging
import os
import sys

from ohgrid.api import run_selection
from ohgrid.config import load_options, validate_options
from ohgrid.errors import OHGridError
from ohgrid.kernel.memory import InMemoryKernel, RecordingSolver
from ohgrid.selection import StaticSelection, PromptSelection

log = logging.getLogger("OHGrid")

GMSH_SUFFIXES = (".geo", ".geo_unrolled")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Build a structured OH block decomposition on a 4-curve loop.")
    p.add_argument("model", help="model file: .json (in-memory) or .geo (Gmsh)")
    p.add_argument("--curves", type=int, nargs="+", default=None,
                   help="the 4 curve ids; prompt interactively if omitted")
    p.add_argument("--options", default=None, help="JSON file with options")
    p.add_argument("--radial-dimension", type=int, default=None)
    p.add_argument("--alpha", type=float, default=None, help="radial extent in (0, 1)")
    p.add_argument("--no-solver", action="store_true", help="skip elliptic relaxation")
    p.add_argument("--angle-interpolation", action="store_true",
                   help="interpolate the angle at the fixed outer edges")
    p.add_argument("--default-dimension", type=int, default=11,
                   help="Gmsh only: point count for undimensioned curves")
    p.add_argument("--out", default=None, help="write the resulting model here")
    p.add_argument("--msh", default=None, help="Gmsh only: write the mesh here")
    p.add_argument("--plot", default=None, help="save a preview plot here")
    return p.parse_args(argv)


def _options(args):
    base = load_options(args.options).to_dict() if args.options else {}
    if args.radial_dimension is not None:
        base["radial_dimension"] = args.radial_dimension
    if args.alpha is not None:
        base["alpha"] = args.alpha
    if args.no_solver:
        base["run_solver"] = False
    if args.angle_interpolation:
        base["edge_angle_interpolation"] = True
    return validate_options(base)


def _selection(args):
    if args.curves is not None:
        return StaticSelection(args.curves)
    return PromptSelection()


def _plot(kernel, topo, path):
    from ohgrid.post.plot_topology import plot_topology
    plot_topology(kernel, topo, show=False, save_path=path)
    log.info("Preview written to: %s", path)


def run_memory(args, opts):
    kernel = InMemoryKernel.load(args.model)
    solver = RecordingSolver()
    topo = run_selection(_selection(args), kernel, opts, solver)
    if topo is None:
        return 0
    log.info("OH regions: %s (new curves: %s)", list(topo.regions), list(topo.new_curves))
    if args.out:
        kernel.save(args.out)
    if args.plot:
        _plot(kernel, topo, args.plot)
    return 0


def run_gmsh(args, opts):
    from ohgrid.kernel.gmsh_kernel import GmshKernel, GmshSmoother, open_model, write_model

    with open_model(args.model):
        kernel = GmshKernel(default_dimension=args.default_dimension)
        solver = GmshSmoother(generate=True)
        topo = run_selection(_selection(args), kernel, opts, solver)
        if topo is None:
            return 0
        log.info("OH regions: %s (new curves: %s)", list(topo.regions), list(topo.new_curves))
        if args.out:
            write_model(args.out)
        if args.msh:
            if not topo.relaxed:
                import gmsh
                gmsh.model.mesh.generate(2)
            write_model(args.msh)
        if args.plot:
            _plot(kernel, topo, args.plot)
    return 0


def main(argv=None):
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    args = parse_args(argv)

    try:
        opts = _options(args)
        log.info("Options: %s", opts.to_dict())
        suffix = os.path.splitext(args.model)[1].lower()
        if suffix in GMSH_SUFFIXES:
            return run_gmsh(args, opts)
        return run_memory(args, opts)
    except OHGridError as e:
        # Reported, model untouched; back to idle
        log.error("%s: %s", type(e).__name__, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
