"""Memory map, timing, register and pin constants of the Lynx hardware."""

INTV_ADDR = 0xFFFE
RESV_ADDR = 0xFFFC
NMIV_ADDR = 0xFFFA
MMC_ADDR = 0xFFF9
ROM_ADDR = 0xFE00
MIK_ADDR = 0xFD00
SUZ_ADDR = 0xFC00

SUZ_ADDR_B = SUZ_ADDR - 1
MIK_ADDR_B = MIK_ADDR - 1
ROM_ADDR_B = ROM_ADDR - 1
MMC_ADDR_B = MMC_ADDR - 1

INTV_ADDR_A = INTV_ADDR + 1
RESV_ADDR_A = RESV_ADDR + 1
NMIV_ADDR_A = NMIV_ADDR + 1

# The crystal is the only source of timing; one tick is 62.5 ns.
CRYSTAL_FREQ = 16_000_000
CRYSTAL_TICK_LENGTH = 1.0 / CRYSTAL_FREQ

# A page mode op-code read is cheaper than a normal RAM access.
RAM_NORMAL_READ_TICKS = 4
RAM_NORMAL_WRITE_TICKS = 4
RAM_PAGE_READ_TICKS = 3

MIKEY_TIMER_READ_TICKS = 5
MIKEY_TIMER_WRITE_TICKS = 5
MIKEY_READ_TICKS = 5
MIKEY_WRITE_TICKS = 5

REFRESH_AND_VIDEO_DMA_TICKS = 28
VIDEO_DMA_BUFFER_LENGTH = 8

# Suzy hardware write takes 5 ticks, reads between 9 and 15.
SUZY_WRITE_TICKS = 5
SUZY_READ_TICKS = 11
SUZY_DATA_BUFFER_LEN = 1
SUZY_BUS_GRANT_TICKS = 10
SUZY_SPRITE_SCB_ADDITIONAL_COST = 75
SUZY_SPRITE_VERT_ADDITIONAL_COST = 60
SUZY_MULT_SIGN_TICKS = 54
SUZY_MULT_NON_SIGN_TICKS = 44

# The CPU cycle performing a cartridge read uses 15 ticks.
CART_READ_TICKS = 15 - 1
CART_WRITE_TICKS = SUZY_WRITE_TICKS

M6502_PIN_RW = 24
M6502_PIN_SYNC = 25
M6502_PIN_IRQ = 26
M6502_PIN_NMI = 27
M6502_PIN_RDY = 28
M6502_PIN_RES = 30

M6502_RW = 1 << M6502_PIN_RW
M6502_SYNC = 1 << M6502_PIN_SYNC
M6502_IRQ = 1 << M6502_PIN_IRQ
M6502_NMI = 1 << M6502_PIN_NMI
M6502_RDY = 1 << M6502_PIN_RDY
M6502_RES = 1 << M6502_PIN_RES

MAPCTL_VEC_BIT = 0b00001000
MAPCTL_ROM_BIT = 0b00000100
MAPCTL_MIK_BIT = 0b00000010
MAPCTL_SUZ_BIT = 0b00000001

TIM0BKUP = 0xFD00
TIM0CTLA = 0xFD01
TIM0CNT = 0xFD02
TIM0CTLB = 0xFD03
TIM1BKUP = 0xFD04
TIM1CTLA = 0xFD05
TIM1CNT = 0xFD06
TIM1CTLB = 0xFD07
TIM2BKUP = 0xFD08
TIM2CTLA = 0xFD09
TIM2CNT = 0xFD0A
TIM2CTLB = 0xFD0B
TIM3BKUP = 0xFD0C
TIM3CTLA = 0xFD0D
TIM3CNT = 0xFD0E
TIM3CTLB = 0xFD0F
TIM4BKUP = 0xFD10
TIM4CTLA = 0xFD11
TIM4CNT = 0xFD12
TIM4CTLB = 0xFD13
TIM5BKUP = 0xFD14
TIM5CTLA = 0xFD15
TIM5CNT = 0xFD16
TIM5CTLB = 0xFD17
TIM6BKUP = 0xFD18
TIM6CTLA = 0xFD19
TIM6CNT = 0xFD1A
TIM6CTLB = 0xFD1B
TIM7BKUP = 0xFD1C
TIM7CTLA = 0xFD1D
TIM7CNT = 0xFD1E
TIM7CTLB = 0xFD1F
AUD0VOL = 0xFD20
AUD0SHFTFB = 0xFD21
AUD0OUTVAL = 0xFD22
AUD0L8SHFT = 0xFD23
AUD0TBACK = 0xFD24
AUD0CTL = 0xFD25
AUD0COUNT = 0xFD26
AUD0MISC = 0xFD27
AUD1VOL = 0xFD28
AUD1SHFTFB = 0xFD29
AUD1OUTVAL = 0xFD2A
AUD1L8SHFT = 0xFD2B
AUD1TBACK = 0xFD2C
AUD1CTL = 0xFD2D
AUD1COUNT = 0xFD2E
AUD1MISC = 0xFD2F
AUD2VOL = 0xFD30
AUD2SHFTFB = 0xFD31
AUD2OUTVAL = 0xFD32
AUD2L8SHFT = 0xFD33
AUD2TBACK = 0xFD34
AUD2CTL = 0xFD35
AUD2COUNT = 0xFD36
AUD2MISC = 0xFD37
AUD3VOL = 0xFD38
AUD3SHFTFB = 0xFD39
AUD3OUTVAL = 0xFD3A
AUD3L8SHFT = 0xFD3B
AUD3TBACK = 0xFD3C
AUD3CTL = 0xFD3D
AUD3COUNT = 0xFD3E
AUD3MISC = 0xFD3F
ATTEN_A = 0xFD40
ATTEN_B = 0xFD41
ATTEN_C = 0xFD42
ATTEN_D = 0xFD43
MPAN = 0xFD44
MSTEREO = 0xFD50
INTRST = 0xFD80
INTSET = 0xFD81
MAGRDY0 = 0xFD84
MAGRDY1 = 0xFD85
AUDIN = 0xFD86
SYSCTL1 = 0xFD87
MIKEYHREV = 0xFD88
MIKEYSREV = 0xFD89
IODIR = 0xFD8A
IODAT = 0xFD8B
SERCTL = 0xFD8C
SERDAT = 0xFD8D
SDONEACK = 0xFD90
CPUSLEEP = 0xFD91
DISPCTL = 0xFD92
PBKUP = 0xFD93
DISPADR = 0xFD94
DISPADRL = 0xFD94
DISPADRH = 0xFD95
MTEST0 = 0xFD9C
MTEST1 = 0xFD9D
MTEST2 = 0xFD9E
GREEN0 = 0xFDA0
GREEN1 = 0xFDA1
GREEN2 = 0xFDA2
GREEN3 = 0xFDA3
GREEN4 = 0xFDA4
GREEN5 = 0xFDA5
GREEN6 = 0xFDA6
GREEN7 = 0xFDA7
GREEN8 = 0xFDA8
GREEN9 = 0xFDA9
GREENA = 0xFDAA
GREENB = 0xFDAB
GREENC = 0xFDAC
GREEND = 0xFDAD
GREENE = 0xFDAE
GREENF = 0xFDAF
BLUERED0 = 0xFDB0
BLUERED1 = 0xFDB1
BLUERED2 = 0xFDB2
BLUERED3 = 0xFDB3
BLUERED4 = 0xFDB4
BLUERED5 = 0xFDB5
BLUERED6 = 0xFDB6
BLUERED7 = 0xFDB7
BLUERED8 = 0xFDB8
BLUERED9 = 0xFDB9
BLUEREDA = 0xFDBA
BLUEREDB = 0xFDBB
BLUEREDC = 0xFDBC
BLUEREDD = 0xFDBD
BLUEREDE = 0xFDBE
BLUEREDF = 0xFDBF

IODAT_CAD = 0b00000010
IODAT_AUDIN = 0b00010000
SYSCTL1_CAS = 0b00000001
SYSCTL1_POWER = 0b00000010

INT_TIMER0 = 0b00000001
INT_TIMER2 = 0b00000100
INT_TIMER4 = 0b00010000

CART_PIN_D3 = 1
CART_PIN_D2 = 2
CART_PIN_D4 = 3
CART_PIN_D1 = 4
CART_PIN_D5 = 5
CART_PIN_D0 = 6
CART_PIN_D6 = 7
CART_PIN_D7 = 8
CART_PIN_CE = 9
CART_PIN_A1 = 10
CART_PIN_A2 = 11
CART_PIN_A3 = 12
CART_PIN_A6 = 13
CART_PIN_A4 = 14
CART_PIN_A5 = 15
CART_PIN_A0 = 16
CART_PIN_A7 = 17
CART_PIN_A16 = 18
CART_PIN_A17 = 19
CART_PIN_A18 = 20
CART_PIN_A19 = 21
CART_PIN_A15 = 22
CART_PIN_A14 = 23
CART_PIN_A13 = 24
CART_PIN_A12 = 25
CART_PIN_WE = 26
CART_PIN_A8 = 27
CART_PIN_A9 = 28
CART_PIN_A10 = 29
CART_PIN_AUDIN = 31

TMPADRL = 0xFC00  # Temporary address, low byte
TMPADRH = 0xFC01
TILTACUML = 0xFC02  # Accumulator for tilt value
TILTACUMH = 0xFC03
HOFFL = 0xFC04  # Offset to H edge of screen
HOFFH = 0xFC05
VOFFL = 0xFC06  # Offset to V edge of screen
VOFFH = 0xFC07
VIDBASL = 0xFC08  # Base address of video build buffer
VIDBASH = 0xFC09
COLLBASL = 0xFC0A  # Base address of collision build buffer
COLLBASH = 0xFC0B
VIDADRL = 0xFC0C  # Current video build address
VIDADRH = 0xFC0D
COLLADRL = 0xFC0E  # Current collision build address
COLLADRH = 0xFC0F
SCBNEXTL = 0xFC10  # Address of next SCB
SCBNEXTH = 0xFC11
SPRDLINEL = 0xFC12  # Start of sprite data line address
SPRDLINEH = 0xFC13
HPOSSTRTL = 0xFC14  # Starting Hpos
HPOSSTRTH = 0xFC15
VPOSSTRTL = 0xFC16  # Starting Vpos
VPOSSTRTH = 0xFC17
SPRHSIZL = 0xFC18  # H size
SPRHSIZH = 0xFC19
SPRVSIZL = 0xFC1A  # V size
SPRVSIZH = 0xFC1B
STRETCHL = 0xFC1C  # H size adder
STRETCHH = 0xFC1D
TILTL = 0xFC1E  # H position adder
TILTH = 0xFC1F
SPRDOFFL = 0xFC20  # Offset to next sprite data line
SPRDOFFH = 0xFC21
SPRVPOSL = 0xFC22  # Current Vpos
SPRVPOSH = 0xFC23
COLLOFFL = 0xFC24  # Offset to collision depository
COLLOFFH = 0xFC25
VSIZACUML = 0xFC26  # Vertical size accumulator
VSIZACUMH = 0xFC27
HSIZOFFL = 0xFC28  # Horizontal size offset
HSIZOFFH = 0xFC29
VSIZOFFL = 0xFC2A  # Vertical size offset
VSIZOFFH = 0xFC2B
SCBADRL = 0xFC2C  # Address of current SCB
SCBADRH = 0xFC2D
PROCADRL = 0xFC2E  # Current sprite data processing address
PROCADRH = 0xFC2F
MATHD = 0xFC52
MATHC = 0xFC53
MATHB = 0xFC54
MATHA = 0xFC55
MATHP = 0xFC56
MATHN = 0xFC57
MATHH = 0xFC60
MATHG = 0xFC61
MATHF = 0xFC62
MATHE = 0xFC63
MATHM = 0xFC6C
MATHL = 0xFC6D
MATHK = 0xFC6E
MATHJ = 0xFC6F
SPRCTL0 = 0xFC80  # Sprite control bits 0 (W)
SPRCTL1 = 0xFC81  # Sprite control bits 1 (W)
SPRCOLL = 0xFC82  # Sprite collision number (W)
SPRINIT = 0xFC83  # Sprite initialization bits (W)
SUZYBUSEN = 0xFC90  # Suzy bus enable (W)
SPRGO = 0xFC91  # Sprite process start bit (W)
SPRSYS = 0xFC92  # System control bits (R/W)
SUZYHREV = 0xFC88  # Suzy hardware revision (R)
JOYSTICK = 0xFCB0  # Read joystick and switches (R)
SWITCHES = 0xFCB1  # Read other switches (R)
RCART0 = 0xFCB2  # RCART (R/W)
RCART1 = 0xFCB3  # RCART (R/W)

SPRSYS_SIGN_MATH = 0b10000000
SPRSYS_ACCUMULATE = 0b01000000
SPRSYS_DONT_COLLIDE = 0b00100000
SPRSYS_VSTRETCH = 0b00010000
SPRSYS_LEFTHAND = 0b00001000
SPRSYS_CLEAR_UNSAFE = 0b00000100
SPRSYS_STOP_CURRENT_SPRITE = 0b00000010

SPRSYS_MATH_IN_PROGRESS = 0b10000000
SPRSYS_MATHBIT = 0b01000000
SPRSYS_LAST_CARRY = 0b00100000
SPRSYS_UNSAFE_ACCESS = 0b00000100
SPRSYS_SPRITE_IN_PROGRESS = 0b00000001

SPRCTL1_LITERAL = 0b10000000
SPRCTL1_ALGO_3 = 0b01000000
SPRCTL1_RELOAD_HVST = 0b00110000
SPRCTL1_RELOAD_HVS = 0b00100000
SPRCTL1_RELOAD_HV = 0b00010000
SPRCTL1_REUSE_PALETTE = 0b00001000
SPRCTL1_SKIP_SPRITE = 0b00000100
SPRCTL1_DRAW_UP = 0b00000010
SPRCTL1_DRAW_LEFT = 0b00000001
SPRCTL1_DRAW_QUAD = 0b00000011

SPRCTL0_BPP = 0b11000000
SPRCTL0_HFLIP = 0b00100000
SPRCTL0_VFLIP = 0b00010000
SPRCTL0_SPR_TYPE = 0b00000111

SPRCOLL_DONT_COLLIDE = 0b00100000
SPRCOLL_NUMBER = 0b00001111

SPRGO_GO = 0b00000001
SPRGO_EVERON = 0b00000100

R_SPRCTL0 = 0
R_SPRCTL1 = 1
R_SPRCOLL = 2
R_SCBNEXTL = 3
R_SCBNEXTH = 4
R_SPRDATAL = 5
R_SPRDATAH = 6
R_HPOSL = 7
R_HPOSH = 8
R_VPOSL = 9
R_VPOSH = 10
R_HSIZEL = 11
R_HSIZEH = 12
R_VSIZEL = 13
R_VSIZEH = 14
R_STRETCHL = 15
R_STRETCHH = 16
R_TILTL = 17
R_TILTH = 18
R_PALETTE_00 = 19
R_PALETTE_01 = 20
R_PALETTE_02 = 21
R_PALETTE_03 = 22
R_PALETTE_04 = 23
R_PALETTE_05 = 24
R_PALETTE_06 = 25
R_PALETTE_07 = 26

LINE_END = 0x80