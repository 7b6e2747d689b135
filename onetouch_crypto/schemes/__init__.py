from .aes_ctr_hmac import AESCTRHMACCipher, decrypt_aes_ctr, encrypt_aes_ctr
from .rsa_oaep import RSAOAEPCipher, encrypt_rsa, load_certificate
