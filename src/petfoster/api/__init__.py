"""HTTP surface for booking quotes and refund previews."""
