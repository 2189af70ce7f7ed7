"""Type tag catalog.

Fixed registry of the record types a store is known to hold, keyed by the
one-byte tag embedded in each key.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..core.types import TypeTag

TYPE_NAMES: Mapping[TypeTag, str] = MappingProxyType({
    0x00: "DBUser",
    0x0F: "DBSig",
    0x10: "DBTeamChain",
    0x19: "DBUserPlusAllKeysV1",
    0xBE: "DBOfflineRPC",
    0xBF: "DBChatCollapses",
    0xCA: "DBMerkleAudit",
    0xCB: "DBUnfurler",
    0xCC: "DBStellarDisclaimer",
    0xCD: "DBFTLStorage",
    0xCE: "DBTeamAuditor",
    0xCF: "DBAttachmentUploader",
    0xD0: "DBHasRandomPW",
    0xDA: "DBDiskLRUEntries",
    0xDB: "DBDiskLRUIndex",
    0xDC: "DBImplicitTeamConflictInfo",
    0xDD: "DBUidToFullName",
    0xDE: "DBUidToUsername",
    0xDF: "DBUserPlusKeysVersioned",
    0xE0: "DBLink",
    0xE1: "DBLocalTrack",
    0xE3: "DBPGPKey",
    0xE4: "DBSigHints",
    0xE5: "DBProofCheck",
    0xE6: "DBUserSecretKeys",
    0xE7: "DBSigChainTailPublic",
    0xE8: "DBSigChainTailSemiprivate",
    0xE9: "DBSigChainTailEncrypted",
    0xEA: "DBChatActive",
    0xEB: "DBUserEKBox",
    0xEC: "DBTeamEKBox",
    0xED: "DBChatIndex",
    0xF0: "DBMerkleRoot",
    0xF1: "DBTrackers",
    0xF2: "DBGregor",
    0xF3: "DBTrackers2",
    0xF4: "DBTrackers2Reverse",
    0xF5: "DBNotificationDismiss",
    0xF6: "DBChatBlockIndex",
    0xF7: "DBChatBlocks",
    0xF8: "DBChatOutbox",
    0xF9: "DBChatInbox",
    0xFA: "DBIdentify",
    0xFB: "DBResolveUsernameToUID",
    0xFC: "DBChatBodyHashIndex",
    0xFD: "DBMerkleStore",
    0xFE: "DBChatConvFailures",
    0xFF: "DBTeamList",
})


def name_of(tag: TypeTag) -> str | None:
    """Return the registered name for tag, or None if unknown."""
    return TYPE_NAMES.get(tag)
