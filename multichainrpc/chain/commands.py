"""MultiChain JSON-RPC commands and their positional parameters.

Each parameter is either a display name (required, no default) or a
single-entry dict ``{display_name: default}`` substituted when the caller
leaves that position out.
"""

from typing import Any

MAX_COUNT = 2147483647

COMMANDS: dict[str, list[Any]] = {
    # General
    "getBlockchainParams": [{"displayNames": True}, {"withUpgrades": True}],
    "getRuntimeParams": [],
    "setRuntimeParam": ["param", "value"],
    "getInfo": [],
    "help": [{"command": ""}],
    "stop": [],
    # Addresses
    "addMultiSigAddress": ["nRequired", "keys"],
    "getAddresses": [{"verbose": False}],
    "getNewAddress": [],
    "importAddress": ["addresses", {"label": ""}, {"rescan": True}],
    "listAddresses": [{"addresses": "*"}, {"verbose": False}, {"count": MAX_COUNT}, {"start": -MAX_COUNT}],
    "createKeyPairs": [{"count": 1}],
    "createMultiSig": ["nRequired", "keys"],
    "validateAddress": ["address"],
    # Permissions
    "grant": ["addresses", "permissions", {"nativeAmount": 0}, {"startBlock": 0}, {"endBlock": 4294967295}],
    "grantFrom": ["fromAddress", "toAddresses", "permissions", {"nativeAmount": 0}, {"startBlock": 0}, {"endBlock": 4294967295}],
    "grantWithData": ["addresses", "permissions", "data", {"nativeAmount": 0}, {"startBlock": 0}, {"endBlock": 4294967295}],
    "revoke": ["addresses", "permissions", {"nativeAmount": 0}],
    "revokeFrom": ["fromAddress", "toAddresses", "permissions", {"nativeAmount": 0}],
    "listPermissions": [{"permissions": "*"}, {"addresses": "*"}, {"verbose": False}],
    "verifyPermission": ["address", "permission"],
    # Assets
    "issue": ["address", "name", "qty", {"units": 1}, {"nativeAmount": 0}, {"customFields": {}}],
    "issueFrom": ["fromAddress", "toAddress", "name", "qty", {"units": 1}, {"nativeAmount": 0}, {"customFields": {}}],
    "issueMore": ["address", "asset", "qty", {"nativeAmount": 0}, {"customFields": {}}],
    "issueMoreFrom": ["fromAddress", "toAddress", "asset", "qty", {"nativeAmount": 0}, {"customFields": {}}],
    "listAssets": [{"assets": "*"}, {"verbose": False}, {"count": MAX_COUNT}, {"start": -MAX_COUNT}],
    "sendAsset": ["address", "asset", "qty", {"nativeAmount": 0}, {"comment": ""}, {"commentTo": ""}],
    "sendAssetFrom": ["fromAddress", "toAddress", "asset", "qty", {"nativeAmount": 0}, {"comment": ""}, {"commentTo": ""}],
    # Wallet balances and transactions
    "getAddressBalances": ["address", {"minConf": 1}, {"includeLocked": False}],
    "getAddressTransaction": ["address", "txid", {"verbose": False}],
    "getAssetBalances": [{"account": ""}, {"minConf": 1}, {"includeWatchOnly": False}, {"includeLocked": False}],
    "getTotalBalances": [{"minConf": 1}, {"includeWatchOnly": False}, {"includeLocked": False}],
    "getWalletTransaction": ["txid", {"includeWatchOnly": False}, {"verbose": False}],
    "listAddressTransactions": ["address", {"count": 10}, {"skip": 0}, {"verbose": False}],
    "listWalletTransactions": [{"count": 10}, {"skip": 0}, {"includeWatchOnly": False}, {"verbose": False}],
    "send": ["address", "amount", {"comment": ""}, {"commentTo": ""}],
    "sendFrom": ["fromAddress", "toAddress", "amount", {"comment": ""}, {"commentTo": ""}],
    "sendWithData": ["address", "amount", "data"],
    "sendWithDataFrom": ["fromAddress", "toAddress", "amount", "data"],
    # Streams
    "create": ["type", "name", "open", {"customFields": {}}],
    "createFrom": ["fromAddress", "type", "name", "open", {"customFields": {}}],
    "listStreams": [{"streams": "*"}, {"verbose": False}, {"count": MAX_COUNT}, {"start": -MAX_COUNT}],
    "publish": ["stream", "key", "data"],
    "publishFrom": ["fromAddress", "stream", "key", "data"],
    "subscribe": ["streams", {"rescan": True}],
    "unsubscribe": ["streams"],
    "getStreamItem": ["stream", "txid", {"verbose": False}],
    "listStreamItems": ["stream", {"verbose": False}, {"count": 10}, {"start": -10}, {"localOrdering": False}],
    "listStreamKeys": ["stream", {"keys": "*"}, {"verbose": False}, {"count": MAX_COUNT}, {"start": -MAX_COUNT}, {"localOrdering": False}],
    "listStreamKeyItems": ["stream", "key", {"verbose": False}, {"count": 10}, {"start": -10}, {"localOrdering": False}],
    "listStreamPublishers": ["stream", {"addresses": "*"}, {"verbose": False}, {"count": MAX_COUNT}, {"start": -MAX_COUNT}, {"localOrdering": False}],
    "listStreamPublisherItems": ["stream", "address", {"verbose": False}, {"count": 10}, {"start": -10}, {"localOrdering": False}],
    "getTxOutData": ["txid", "vout", {"countBytes": MAX_COUNT}, {"startByte": 0}],
    # Blockchain
    "getBestBlockHash": [],
    "getBlock": ["hashOrHeight", {"verbose": 1}],
    "getBlockchainInfo": [],
    "getBlockCount": [],
    "getBlockHash": ["height"],
    "getDifficulty": [],
    "getMempoolInfo": [],
    "getRawMempool": [{"verbose": False}],
    "getRawTransaction": ["txid", {"verbose": 0}],
    "getTxOut": ["txid", "vout", {"unconfirmed": False}],
    "listBlocks": ["blocks", {"verbose": False}],
    # Network
    "addNode": ["node", "command"],
    "getAddedNodeInfo": [{"dns": False}],
    "getConnectionCount": [],
    "getNetworkInfo": [],
    "getPeerInfo": [],
    "ping": [],
    # Mining
    "getMiningInfo": [],
    "getNetworkHashPs": [{"blocks": 120}, {"height": -1}],
    # Raw transactions
    "appendRawChange": ["txHex", "address", {"nativeFee": 0}],
    "appendRawData": ["txHex", "data"],
    "createRawTransaction": ["inputs", "amounts", {"data": []}, {"action": ""}],
    "createRawSendFrom": ["fromAddress", "amounts", {"data": []}, {"action": ""}],
    "decodeRawTransaction": ["txHex"],
    "sendRawTransaction": ["txHex"],
    "signRawTransaction": ["txHex", {"parentOutputs": []}, {"privateKeys": []}, {"sighashType": "ALL"}],
    # Outputs and keys
    "listUnspent": [{"minConf": 1}, {"maxConf": 999999}, {"addresses": []}],
    "listLockUnspent": [],
    "lockUnspent": ["unlock", {"outputs": []}],
    "dumpPrivKey": ["address"],
    "importPrivKey": ["privKeys", {"label": ""}, {"rescan": True}],
    "backupWallet": ["filename"],
    "encryptWallet": ["passphrase"],
    "walletPassphrase": ["passphrase", "timeout"],
    "walletLock": [],
}
