"""Typed models of the FoundationDB status document."""