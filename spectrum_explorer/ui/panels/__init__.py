"""Side panels — conversion inputs and region information."""
