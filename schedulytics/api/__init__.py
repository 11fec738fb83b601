"""gRPC transport layer: proto contract and versioned servicers."""
