"""
Randomised checks of the algebraic properties of Vector and Matrix.

Shapes and values come from the seeded rng fixture, so failures are
reproducible.
"""

import numpy as np
import pytest

from pylinalg import Matrix, MismatchedSizesError, Vector
from pylinalg.core.tolerances import CPU_FP64_ACCUMULATED


N_TRIALS = 25


def random_matrix(rng):
    rows, cols = (int(n) for n in rng.integers(1, 7, size=2))
    return Matrix.from_shaped(rng.standard_normal(rows * cols), rows, cols)


class TestMatrixProperties:

    def test_shape_matches_request(self, rng):
        for _ in range(N_TRIALS):
            rows, cols = (int(n) for n in rng.integers(0, 7, size=2))
            m = Matrix.from_shaped(rng.standard_normal(rows * cols), rows, cols)
            assert m.row_count() == rows
            assert m.column_count() == cols

    def test_rows_read_flat_buffer(self, rng):
        for _ in range(N_TRIALS):
            m = random_matrix(rng)
            rows, cols = m.shape
            for i in range(rows):
                row = m.row(i)
                for k in range(cols):
                    assert row[k] == m[i * cols + k]

    def test_columns_read_flat_buffer(self, rng):
        for _ in range(N_TRIALS):
            m = random_matrix(rng)
            rows, cols = m.shape
            for j in range(cols):
                col = m.col(j)
                for k in range(rows):
                    assert col[k] == m[k * cols + j]

    def test_transpose_round_trip(self, rng):
        for _ in range(N_TRIALS):
            m = random_matrix(rng)
            assert m.transpose().transpose() == m

    def test_transpose_matches_numpy(self, rng):
        for _ in range(N_TRIALS):
            m = random_matrix(rng)
            np.testing.assert_array_equal(m.transpose().to_numpy(), m.to_numpy().T)


class TestVectorProperties:

    def test_dot_commutative(self, rng):
        for _ in range(N_TRIALS):
            n = int(rng.integers(0, 20))
            a = Vector.from_sequence(rng.standard_normal(n))
            b = Vector.from_sequence(rng.standard_normal(n))
            assert a * b == pytest.approx(b * a, rel=CPU_FP64_ACCUMULATED.rtol)

    def test_dot_mismatch_always_raises(self, rng):
        for _ in range(N_TRIALS):
            n, m = (int(x) for x in rng.integers(0, 10, size=2))
            if n == m:
                continue
            with pytest.raises(MismatchedSizesError):
                Vector.zeros(n).dot(Vector.zeros(m))

    def test_scaling_composes(self, rng):
        for _ in range(N_TRIALS):
            a = Vector.from_sequence(rng.standard_normal(8))
            c1, c2 = (float(c) for c in rng.standard_normal(2))
            assert ((a * c1) * c2).isclose(a * (c1 * c2), tolerance=CPU_FP64_ACCUMULATED)

    def test_length_matches_numpy_norm(self, rng):
        for _ in range(N_TRIALS):
            values = rng.standard_normal(int(rng.integers(0, 30)))
            assert Vector.from_sequence(values).length() == pytest.approx(
                float(np.linalg.norm(values)), rel=CPU_FP64_ACCUMULATED.rtol
            )

    def test_length_scales_with_factor(self, rng):
        a = Vector.from_sequence(rng.standard_normal(10))
        assert (a * -3.0).length() == pytest.approx(3.0 * a.length())

    def test_lenient_reads_past_end_are_zero(self, rng):
        for _ in range(N_TRIALS):
            n = int(rng.integers(0, 10))
            v = Vector.from_sequence(rng.standard_normal(n))
            assert v[n + int(rng.integers(0, 100))] == 0.0
