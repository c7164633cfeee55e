#!/usr/bin/env python3
import argparse, os
from fieldmap.mapgen.generator import generate_map

def write_map(text, path):
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text)

def cmd_emit(args):
    m = generate_map(args.seed)
    write_map(m.render(), args.out)
    print(f"Wrote {args.out} (buildings {m.buildings_placed}/{len(m.buildings)})")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    incomplete = []
    for seed in range(args.first, args.first + args.count):
        m = generate_map(seed)
        write_map(m.render(), os.path.join(args.outdir, f"seed_{seed}.txt"))
        if not m.complete:
            incomplete.append(seed)
    print(f"Wrote {args.count} maps to {args.outdir}")
    if incomplete:
        print(f"Incomplete maps (missing road or building): {incomplete}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--outdir', type=str, required=True)
    p2.add_argument('--first', type=int, default=1)
    p2.add_argument('--count', type=int, default=25)
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
