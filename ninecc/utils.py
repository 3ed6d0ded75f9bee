maxsize = 9223372036854775807

# add/sub r64 only encode a sign-extended 32-bit immediate
max_imm32 = 2147483647
