'''
Graph file formats.

Text:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

Binary files hold the same integers, each as 4 little-endian bytes.
'''

from __future__ import annotations

from mstcompare.graph import ConstraintViolation, Edge, Graph

INT_BYTES = 4


def to_bin(num: int) -> bytes:
    return int(num).to_bytes(length=INT_BYTES, byteorder='little', signed=True)


def text_to_bin(infile_name: str, outfile_name: str) -> None:
    with open(infile_name, 'r') as infile:
        with open(outfile_name, 'wb') as outfile:
            for line in infile:
                for num in line.split():
                    outfile.write(to_bin(int(num)))


def _check_count(fname: str, expected: int, found: int) -> None:
    if expected != found:
        raise ConstraintViolation(f'{fname}: header says {expected} edges, found {found}')


def read_text(fname: str) -> Graph:
    with open(fname, 'r') as f:
        header = f.readline().split()
        if len(header) != 2:
            raise ConstraintViolation(f'{fname}: expected "<nvertices> <nedges>" header')
        try:
            nvertices = int(header[0])
            nedges = int(header[1])
        except ValueError:
            raise ConstraintViolation(f'{fname}: non-integer header {header!r}') from None

        edges = []

        for line in f:
            if line.strip():
                edges.append(Edge.from_line(line))

    _check_count(fname, nedges, len(edges))
    return Graph(nvertices, edges)


def read_bin(fname: str) -> Graph:
    with open(fname, 'rb') as f:
        data = f.read()

    if len(data) % INT_BYTES != 0:
        raise ConstraintViolation(f'{fname}: size is not a multiple of {INT_BYTES} bytes')

    nums = [int.from_bytes(data[i:i + INT_BYTES], byteorder='little', signed=True)
            for i in range(0, len(data), INT_BYTES)]
    if len(nums) < 2:
        raise ConstraintViolation(f'{fname}: missing header')

    nvertices, nedges = nums[0], nums[1]
    body = nums[2:]
    if len(body) % 3 != 0:
        raise ConstraintViolation(f'{fname}: truncated edge record')

    edges = [Edge(*body[i:i + 3]) for i in range(0, len(body), 3)]
    _check_count(fname, nedges, len(edges))
    return Graph(nvertices, edges)


def read_graph(fname: str, binary: bool=False) -> Graph:
    if binary:
        return read_bin(fname)
    return read_text(fname)


def write_graph(graph: Graph, fname: str, binary: bool=False) -> None:
    if binary:
        with open(fname, 'wb') as f:
            f.write(to_bin(graph.vertex_count))
            f.write(to_bin(graph.edge_count))

            for edge in graph.edges:
                f.write(to_bin(edge.u))
                f.write(to_bin(edge.v))
                f.write(to_bin(edge.weight))
    else:
        with open(fname, 'w') as f:
            f.write(f'{graph.vertex_count} {graph.edge_count}\n')

            for edge in graph.edges:
                f.write(f'{edge.u} {edge.v} {edge.weight}\n')


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)

    args = parser.parse_args()

    text_to_bin(args.infile, args.outfile)
