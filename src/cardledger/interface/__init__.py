"""Interface layer for cardledger."""
