#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

from kprovision.apply import apply_steps
from kprovision.config import ProvisionerConfig
from kprovision.errors import ProvisionError
from kprovision.io_utils import print_error, render_manifests, setup_logging, write_manifests
from kprovision.kube import build_client, resolve_config
from kprovision.plan import plan_steps

logger = logging.getLogger("kprovision")


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="kprovision: create the apiserver Deployment, its Services and Ingress in a Kubernetes cluster"
    )
    p.add_argument("-kubeconfig", "--kubeconfig", default=None,
                   help="absolute path to the kubeconfig file (default: $KUBECONFIG or ~/.kube/config)")
    p.add_argument("--context", default=None, help="kubeconfig context to use")
    p.add_argument("-n", "--namespace", default=None, help="target namespace (default: default)")
    p.add_argument("--plan", action="store_true", help="Print the ordered create steps and exit")
    p.add_argument("--dry-run", action="store_true", help="Render the manifests as YAML instead of creating them")
    p.add_argument("-o", "--output", help="With --dry-run, write the YAML to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)
    if args.output and not args.dry_run:
        p.error("--output requires --dry-run")
    return args


def run(cfg, steps):
    configuration = resolve_config(cfg.kubeconfig, cfg.context)
    dyn_client = build_client(configuration)
    return apply_steps(dyn_client, steps, namespace=cfg.namespace)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cfg = ProvisionerConfig.from_env().with_overrides(
        kubeconfig=args.kubeconfig, context=args.context, namespace=args.namespace
    )
    steps = plan_steps()

    if args.plan:
        print("PLANNED STEPS:")
        for i, step in enumerate(steps, 1):
            print(f"{i}. {step} (namespace {cfg.namespace})")
        return 0

    if args.dry_run:
        if args.output:
            out_path = write_manifests(steps, Path(args.output))
            print(f"✅ Wrote: {out_path}")
        else:
            print(render_manifests(steps), end="")
        return 0

    logger.debug("provisioning into namespace %s with kubeconfig %r", cfg.namespace, cfg.kubeconfig)
    try:
        run(cfg, steps)
    except ProvisionError as exc:
        print_error(exc.describe())
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
