"""
Errors raised by the console when a remote call does not go through
"""


class RemoteCallError(Exception):
    """A transaction was mined but the contract call did not succeed"""

    def __init__(self, description, tx_hash=None, receipt=None):
        self.description = description
        self.tx_hash = tx_hash
        self.receipt = receipt
        message = f"{description} failed"
        if tx_hash:
            message += f" (tx {tx_hash})"
        super().__init__(message)


class ArtifactNotFoundError(FileNotFoundError):
    """No compiled artifact exists for the requested contract name"""
