# -*- coding: utf-8 -*-
"""
Минимальный парсер Wavefront OBJ (позиции, нормали, треугольные индексы).
Материалы MTL и текстурные координаты игнорируются – для пикинга не нужны.
"""
from pathlib import Path

import numpy as np

from raycast3d.utils.logger import logger


def _resolve_index(token: str, count: int, line_no: int) -> int:
    """OBJ‑индексы 1‑based, отрицательные считаются с конца списка."""
    idx = int(token)
    if idx < 0:
        idx = count + idx
    else:
        idx -= 1
    if not 0 <= idx < count:
        raise ValueError(f"OBJ line {line_no}: index {token} out of range")
    return idx


def compute_vertex_normals(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Сглаженные нормали: сумма нормалей прилегающих граней."""
    tris = indices.reshape(-1, 3)
    v0, v1, v2 = (positions[tris[:, i]] for i in range(3))
    face_n = np.cross(v1 - v0, v2 - v0)

    normals = np.zeros_like(positions, dtype=np.float32)
    for i in range(3):
        np.add.at(normals, tris[:, i], face_n)

    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    lengths[lengths == 0.0] = 1.0
    return (normals / lengths).astype(np.float32)


def load_obj(path):
    """
    Читает OBJ‑файл и возвращает ``(positions, normals, indices)``:
    float32 (N, 3), float32 (N, 3), uint32 (M * 3).
    Многоугольники разбиваются веером на треугольники.
    """
    p = Path(path).expanduser()
    if not p.is_file():
        raise FileNotFoundError(f"OBJ file not found: {p}")

    verts = []
    normals = []
    faces = []   # списки пар (pos, norm)

    with p.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            parts = line.split()
            if not parts or parts[0].startswith("#"):
                continue
            try:
                if parts[0] in ("v", "vn") and len(parts) < 4:
                    raise ValueError("expected three coordinates")
                if parts[0] == "v":
                    verts.append([float(c) for c in parts[1:4]])
                elif parts[0] == "vn":
                    normals.append([float(c) for c in parts[1:4]])
                elif parts[0] == "f":
                    face = []
                    for v in parts[1:]:
                        # форматы: v, v/vt, v//vn, v/vt/vn
                        idx = v.split("/")
                        pos = _resolve_index(idx[0], len(verts), line_no)
                        nrm = -1
                        if len(idx) > 2 and idx[2]:
                            nrm = _resolve_index(idx[2], len(normals), line_no)
                        face.append((pos, nrm))
                    faces.append(face)
            except (IndexError, ValueError) as exc:
                raise ValueError(f"{p}: malformed line {line_no}: {line.strip()!r}") from exc

    vertex_data = []
    normal_data = []
    index_data = []
    vert_dict = {}   # (pos, norm) -> индекс
    for face in faces:
        if len(face) < 3:
            continue
        v0 = face[0]
        for i in range(1, len(face) - 1):
            for key in (v0, face[i], face[i + 1]):
                if key not in vert_dict:
                    pos, nrm = key
                    vert_dict[key] = len(vertex_data)
                    vertex_data.append(verts[pos])
                    normal_data.append(normals[nrm] if nrm >= 0 else None)
                index_data.append(vert_dict[key])

    if not index_data:
        raise ValueError(f"{p}: no triangles found")

    positions = np.array(vertex_data, dtype=np.float32).reshape(-1, 3)
    indices = np.array(index_data, dtype=np.uint32)

    if any(n is None for n in normal_data):
        normals_arr = compute_vertex_normals(positions, indices)
    else:
        normals_arr = np.array(normal_data, dtype=np.float32).reshape(-1, 3)

    logger.info(f"[Loader] Loaded {p.name}: {len(positions)} vertices, "
                f"{len(indices) // 3} triangles")
    return positions, normals_arr, indices
