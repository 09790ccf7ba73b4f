import hypothesis
import pytest
import torch
import torch.testing

from torchmorton.coding import deinterleave_2x8bit, deinterleave_8bit
from torchmorton.testing import reference_deinterleave, strategies


def _pack(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    return a | (b << 16)


class TestDeinterleave2x8Bit:
    """Tests for deinterleaving two packed 8-bit Morton codes."""

    def test_lane_layout(self):
        """Test that each lane's result lands in the same lane of the output."""
        a = 0b00010001  # (x, y) = (5, 0)
        b = 0b11111110  # (x, y) = (14, 15)
        words = deinterleave_2x8bit(torch.tensor(a | (b << 16)))
        torch.testing.assert_close(
            words, torch.tensor([5 | (14 << 16), 0 | (15 << 16)])
        )

    def test_zero(self):
        """Test that two zero codes decode to zero words."""
        words = deinterleave_2x8bit(torch.tensor(0))
        torch.testing.assert_close(words, torch.tensor([0, 0]))

    def test_all_ones(self):
        """Test that 0x00FF00FF decodes to 15 in every lane."""
        words = deinterleave_2x8bit(torch.tensor(0x00FF00FF))
        torch.testing.assert_close(
            words, torch.tensor([0x000F000F, 0x000F000F])
        )

    def test_batched_equivalence_exhaustive(self):
        """Test agreement with two deinterleave_8bit calls for every (a, b)."""
        a, b = torch.meshgrid(
            torch.arange(256), torch.arange(256), indexing="ij"
        )
        a, b = a.reshape(-1), b.reshape(-1)
        words = deinterleave_2x8bit(_pack(a, b))
        single_a = deinterleave_8bit(a)
        single_b = deinterleave_8bit(b)
        expected = single_a | (single_b << 16)
        torch.testing.assert_close(words, expected)

    def test_lanes_independent(self):
        """Test that lane 1 does not change lane 0's result, and vice versa."""
        a = torch.arange(256)
        alone = deinterleave_2x8bit(a)
        crowded = deinterleave_2x8bit(_pack(a, torch.full_like(a, 0xFF)))
        torch.testing.assert_close(crowded & 0xFFFF, alone)

    @hypothesis.settings(deadline=None)
    @hypothesis.given(strategies.packed_code_pairs())
    def test_matches_reference(self, pair):
        """Test against the bit-by-bit reference implementation."""
        a, b = pair
        xs, ys = deinterleave_2x8bit(torch.tensor(a | (b << 16))).tolist()
        ax, ay = reference_deinterleave(a, bits=4)
        bx, by = reference_deinterleave(b, bits=4)
        assert xs == ax | (bx << 16)
        assert ys == ay | (by << 16)

    def test_int32_input(self):
        """Test int32 packed input."""
        packed = torch.tensor([0x00030001], dtype=torch.int32)
        words = deinterleave_2x8bit(packed)
        assert words.dtype == torch.int64
        torch.testing.assert_close(
            words, torch.tensor([[0x00010001, 0x00010000]])
        )


class TestDeinterleave2x8BitPreconditions:
    """Tests for the lane guard and the debug-only bit-width check."""

    @pytest.mark.skipif(not __debug__, reason="assertions disabled by -O")
    @pytest.mark.parametrize("bit", [*range(8, 16), *range(24, 32)])
    def test_lane_overflow_asserted(self, bit):
        """Test that bits above each lane's 8-bit code fail the debug check."""
        with pytest.raises(AssertionError, match="deinterleave_2x8bit"):
            deinterleave_2x8bit(torch.tensor([1 << bit]))

    def test_type_errors(self):
        with pytest.raises(TypeError, match="must be a Tensor"):
            deinterleave_2x8bit(0x00010001)
        with pytest.raises(TypeError, match="integer tensor"):
            deinterleave_2x8bit(torch.tensor([True]))


class TestDeinterleave2x8BitCompile:
    """Tests for torch.compile compatibility."""

    def test_compile(self):
        """Test that the operator, debug check included, traces as one graph."""
        compiled = torch.compile(
            deinterleave_2x8bit, backend="eager", fullgraph=True
        )
        codes = torch.tensor([0, 0x00FF00FF, 0x00030001, 0x00FE0011])
        torch.testing.assert_close(compiled(codes), deinterleave_2x8bit(codes))

    def test_compile_applies_lane_guard(self):
        """Test that lane overflow bits are cleared when the check is skipped."""
        compiled = torch.compile(
            deinterleave_2x8bit, backend="eager", fullgraph=True
        )
        words = compiled(torch.tensor([0xFF00FF00]))
        torch.testing.assert_close(words, torch.tensor([[0, 0]]))
